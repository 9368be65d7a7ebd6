"""Infrastructure Layer - stateful store implementation and cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/, never the reverse
    - Mutable state is owned by explicit instances, never module globals
"""
