"""
Infrastructure Layer
====================

Storage port implementations.

Contains:
- memory: thread-safe in-memory repositories
- db: MongoDB repositories
"""
