"""Infrastructure Layer - storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - Backend-specific exceptions are mapped to StorageError before leaving this layer

Design Decisions:
    - One module per backend, selected by storage.create_store()
"""
