"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, loader payloads)
    - Domain enums from core/ used for constrained fields
"""
