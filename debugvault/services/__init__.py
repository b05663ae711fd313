"""Services Layer: async orchestration around the pure core.

Invariants:
    - Collaborators (identity, repository) always injected, never module globals
    - Services own scheduling and logging; core owns the rules
"""
