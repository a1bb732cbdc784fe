"""
Application package.

Holds the FastAPI entrypoint and its layers: ``api`` (routers and
error handlers), ``services`` (business rules), ``repositories``
(SQL gateways), ``schemas`` (pydantic models) and ``core`` (settings,
logging, database, errors and messages).
"""
