"""Database Layer — declarative base and the shared Entity base class."""
