"""Repositories - SQLAlchemy implementations of the store protocols in core/.

Invariants:
    - Every method takes the request's AsyncSession as its first argument
    - Repositories flush but never commit
    - Driver errors leave this package as ConflictError or DatabaseError
"""
