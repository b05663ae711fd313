"""Pydantic Schemas: record and filter validation at the data-store boundary.

Invariants:
    - Schemas validate at system boundary (document store payloads, form input)
    - Domain types from core/ used for enum fields
"""
