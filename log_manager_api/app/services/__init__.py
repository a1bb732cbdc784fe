"""
Service layer.

Each service encapsulates the business logic of one domain and works
on repositories bound to the current request's connection, so API
handlers never issue SQL themselves.
"""
