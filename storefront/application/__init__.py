"""
Application Layer
=================

Application services, use cases and DTOs.
This layer orchestrates domain entities and repositories.

Contains:
- Services: business rules for products and users
- Use Cases: controller-level operations built on the services
- DTO: pydantic request/response models for the API
"""
