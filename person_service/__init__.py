"""Person service.

A small REST service that stores people and their postal addresses in a
relational database.

Core subpackages
----------------

- ``person_service.core``:

  - Logging and Logfire monitoring setup.
  - The error hierarchy shared by the persistence and HTTP layers.
  - Email validation.
  - The database layer (SQLModel entities, async repositories, engine and
    session management) and the API I/O schemas.

- ``person_service.server``:

  - The FastAPI application, its routers for ``/person`` and ``/address``,
    middleware and exception handlers.

Deleting a person soft-deletes the person together with every address it
owns; nothing is ever physically removed by the API.
"""

__version__ = "0.1.0"
