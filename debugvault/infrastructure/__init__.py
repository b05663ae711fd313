"""Infrastructure Layer: cross-cutting concerns shared by the services.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
