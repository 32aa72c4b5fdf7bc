"""Pydantic Schemas — request/response contracts for the API boundary.

Invariants:
    - Request schemas are the declarative rule sets the input validator runs
    - Response schemas serialize with camelCase aliases (forgedBy, createdAt, updatedAt)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
