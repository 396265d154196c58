"""Pydantic Schemas — request/response validation for the people endpoints.

Invariants:
    - Schemas validate at the system boundary (HTTP bodies, operation requests)
    - AddressType from core/ used for the address_type fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
