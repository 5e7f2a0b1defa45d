"""
Application Layer
=================

Application services and use cases.
This layer validates raw input, orchestrates domain entities and repositories.

Contains:
- Validation: Field validators shared by all use cases
- Use Cases: Business operations (register shop, create booking, etc.)
- Services: Application services that coordinate multiple use cases
- DTO: Pydantic response models for the HTTP layer
"""
