"""DebugVault Package: search, filtering and export core for the debugging dashboard.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
