"""Base Layer — generic Assembly, Service and Controller building blocks.

Invariants:
    - Dependency order: assembly → service → controller → router
    - Every before/after hook defaults to a no-op

Design Decisions:
    - Hooks are injected objects, not overridden template methods: a resource
      customizes behavior by passing a ServiceHooks/ControllerHooks subclass
"""
