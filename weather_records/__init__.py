"""Weather records service.

Subpackages:
- api: FastAPI application factory, routes, and middleware.
- schemas: Pydantic request/response models.
- services: In-memory store, seed fixture, and the upstream provider client.
"""

__all__ = ["api", "schemas", "services"]
