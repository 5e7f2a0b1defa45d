"""
Infrastructure Layer
====================

Concrete implementations of domain contracts: MongoDB repositories and
the placeholder slot provider.
"""
