"""EcoWatch Application Package - citizen environmental reports and water-quality readings.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
