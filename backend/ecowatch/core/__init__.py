"""Core Layer - pure domain logic, no IO, no async, no database.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Record building is deterministic given the payload and the timestamp

Design Decisions:
    - Functional core separated from imperative shell: stores and routes
      orchestrate IO around the pure functions defined here
"""
