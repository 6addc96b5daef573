"""Infrastructure Layer — database sessions, repositories and logging setup.

Invariants:
    - Only this layer talks to SQLAlchemy engines and sessions directly
    - Core protocols (core/repository_protocols.py) are implemented here
"""
