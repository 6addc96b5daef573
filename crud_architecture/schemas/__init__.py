"""Pydantic Schemas — DTOs validated at the API boundary.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
