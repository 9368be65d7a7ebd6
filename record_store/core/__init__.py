"""Core Layer - pure domain logic, no IO, no logging, no locks.

Invariants:
    - No module in core/ imports from infrastructure/, config, or main
    - Records are values: every change produces a new object

Design Decisions:
    - Functional core separated from imperative shell (store lives in infrastructure/)
"""
