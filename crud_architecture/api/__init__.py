"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses or 204 No Content

Design Decisions:
    - Thin routes delegate to controllers built by base/router.py
"""
