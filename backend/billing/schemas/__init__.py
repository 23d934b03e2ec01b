"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (wire payloads, responses)
    - Decimals leave the API as strings, dates as YYYY-MM-DD

Design Decisions:
    - Separate from models/ and core/entities: schemas are API contracts,
      models are persistence, entities are what services pass around
"""
