"""
FastAPI application package.

``main`` assembles the app; ``api`` holds routes, ``services`` the
SQL-issuing business logic, ``schemas`` the Pydantic payloads and
``core`` configuration, logging, database access and errors.
"""
