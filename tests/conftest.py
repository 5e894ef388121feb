"""Shared fixtures: in-memory repositories, services and an API client."""
import pytest
from fastapi.testclient import TestClient

from storefront.application.services.product_service import ProductService
from storefront.application.services.user_service import UserService
from storefront.core.config import reset_settings
from storefront.di.container import reset_container
from storefront.infrastructure.memory import InMemoryProductRepository, InMemoryUserRepository


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("API_PREFIX", "/api/v1")
    reset_settings()
    reset_container()

    from storefront.main import create_application

    with TestClient(create_application()) as test_client:
        yield test_client

    reset_container()
    reset_settings()
