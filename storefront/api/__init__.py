"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer turns HTTP requests into use case and service calls and maps
service errors to status codes.
"""
