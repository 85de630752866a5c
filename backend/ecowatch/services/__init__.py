"""Services Layer - orchestrates pure record logic around RecordStore IO.

Invariants:
    - Validation happens before any storage call (failed requests never write)
    - Services raise EcoWatchError subclasses; HTTP mapping belongs to api/
"""
