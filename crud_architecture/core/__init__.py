"""Core Layer — error types, domain types and boundary protocols. No IO, no DB.

Invariants:
    - No module in core/ imports from base/, api/, infrastructure/, or db/
"""
