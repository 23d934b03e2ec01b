"""Infrastructure Layer - database engine, logging setup and credential primitives.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Third-party failures are mapped to billing.core.errors types at this layer
"""
