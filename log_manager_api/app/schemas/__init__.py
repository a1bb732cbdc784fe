"""
Pydantic schema definitions for API payloads and stored entities.

Each domain (users, logs) defines its own models for request and
response bodies.
"""
