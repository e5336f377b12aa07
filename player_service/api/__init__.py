"""API package for Player Service.

This package exposes a FastAPI application that serves an in-memory
collection of player records: list them, fetch one by id, create a new one.

The package layout follows a standard FastAPI structure with routers,
dependency helpers, a service layer (the in-memory store), and Pydantic
models.

Notes:
    - State lives in the store owned by each application instance; nothing
      is persisted and a restart reseeds the collection.
    - Add auth/middleware in `main.py` if needed later.
"""
