"""API Layer - HTTP routers and global error handlers.

Invariants:
    - api/ depends on services/ and infrastructure.storage.get_store only
    - Response bodies are JSON; errors use the EcoWatchError envelope
"""
