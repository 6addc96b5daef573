"""Assemblies — one DTO ↔ Entity converter per resource."""
