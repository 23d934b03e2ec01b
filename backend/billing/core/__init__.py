"""Core Layer - domain values, money arithmetic, request scope and store contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - Nothing in core/ logs, retries or opens a database connection

Design Decisions:
    - Functional core separated from imperative shell: services/ orchestrate the
      async store calls around the pure arithmetic and defaulting rules here
"""
