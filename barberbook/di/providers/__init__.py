"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ServiceProvider",
]
