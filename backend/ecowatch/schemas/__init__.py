"""Pydantic Schemas - request/response shapes for API endpoints.

Invariants:
    - Request schemas only check JSON types; presence and value rules live in core/records
    - Response schemas use the camelCase field names stored on disk and in MongoDB

Design Decisions:
    - Lenient request models (every field optional) so a missing field yields the
      domain MISSING_REQUIRED_FIELDS error listing all missing names at once
"""
