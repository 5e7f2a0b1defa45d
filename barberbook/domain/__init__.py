"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Domain models representing shops, operators, services and bookings
- Exceptions: Error taxonomy shared by every layer
- Repository Interfaces: Abstract contracts for data access
"""
