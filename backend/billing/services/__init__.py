"""Services - Authenticator and InvoiceService, the orchestration half of the core.

Invariants:
    - Services receive every collaborator through __init__ (no module-level singletons)
    - Services never commit, roll back or log; the request boundary owns the transaction
"""
