"""
Dependency Injection
====================

Container wiring database → repositories → application services.
"""
