"""
Application package.

``core`` holds configuration, logging, persistence and error types;
``schemas`` the record and payload models; ``services`` the
repositories, validation, queries and the operation services; ``api``
the FastAPI routes.  ``create_app`` in ``main`` assembles them.
"""
