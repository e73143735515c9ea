"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services work
against the in-memory ``CitiesDataStore`` and raise the exceptions in
``core.errors``; API handlers translate those into HTTP responses.
"""
