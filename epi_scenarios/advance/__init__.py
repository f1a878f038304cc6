from .advance import advance_state
