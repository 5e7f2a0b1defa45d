"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers (v1)
- Dependencies: Dependency injection setup
- Errors: Mapping of failures to the JSON error envelope
"""
