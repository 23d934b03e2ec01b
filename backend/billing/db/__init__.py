"""Database Infrastructure - declarative Base and identifier generation.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Primary keys are ULID strings generated in Python, never by the database
"""
