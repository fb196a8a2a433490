"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities
- Storage and repository interfaces
- Domain exceptions
"""
