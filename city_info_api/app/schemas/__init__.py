"""
Pydantic schema definitions for API payloads.

Each domain (cities, points of interest) defines its own Pydantic
models for request and response bodies.  The read models double as the
in-memory records held by the data store.
"""
