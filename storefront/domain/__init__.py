"""
Domain Layer
============

Core business entities and storage contracts.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Product and User entities
- Repository Interfaces: Abstract contracts for data access
"""
