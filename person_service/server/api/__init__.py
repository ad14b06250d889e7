"""
API routers.

- persons: ``/person`` CRUD endpoints
- addresses: ``/address`` CRUD endpoints
- health: liveness and version endpoints
"""
