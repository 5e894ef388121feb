"""
Unit tests for controller-level use cases.

Service collaborators are mocked where the test is about what the use
case does before (or instead of) calling the service.
"""
from unittest.mock import MagicMock

import pytest

from storefront.application.services.product_service import ProductService
from storefront.application.services.user_service import UserService
from storefront.application.use_cases.product_use_cases import (
    DeleteProductUseCase,
    GetProductUseCase,
    RegisterProductUseCase,
    SetProductStockUseCase,
)
from storefront.application.use_cases.user_use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from storefront.core.exceptions import InvalidArgumentError, NotFoundError
from storefront.domain.models.product import Product
from storefront.domain.models.user import User


@pytest.fixture
def mock_product_service():
    return MagicMock(spec=ProductService)


@pytest.fixture
def mock_user_service():
    return MagicMock(spec=UserService)


class TestRegisterProduct:
    """Test RegisterProductUseCase"""

    @pytest.mark.parametrize("price", [0, -100.0])
    def test_non_positive_price_never_reaches_service(self, mock_product_service, price):
        use_case = RegisterProductUseCase(mock_product_service)

        with pytest.raises(InvalidArgumentError, match="zero or negative price"):
            use_case.execute(Product(id=1, name="Phone", price=price))

        mock_product_service.save.assert_not_called()

    def test_nan_price_never_reaches_service(self, mock_product_service):
        use_case = RegisterProductUseCase(mock_product_service)

        with pytest.raises(InvalidArgumentError, match="zero or negative price"):
            use_case.execute(Product(name="Phone", price=float("nan")))

        mock_product_service.save.assert_not_called()

    def test_blank_name_never_reaches_service(self, mock_product_service):
        use_case = RegisterProductUseCase(mock_product_service)

        with pytest.raises(InvalidArgumentError, match="Product name is required"):
            use_case.execute(Product(name="  ", price=10.0))

        mock_product_service.save.assert_not_called()

    def test_valid_product_is_saved(self, mock_product_service):
        product = Product(name="Phone", price=1000.0)
        mock_product_service.save.return_value = Product(id=1, name="Phone", price=1000.0)

        result = RegisterProductUseCase(mock_product_service).execute(product)

        assert result.id == 1
        mock_product_service.save.assert_called_once_with(product)

    def test_service_still_checks_stock(self, product_service):
        with pytest.raises(InvalidArgumentError, match="Stock quantity cannot be negative"):
            RegisterProductUseCase(product_service).execute(Product(name="Phone", price=1.0, stock=-2))


class TestGetProduct:
    """Test GetProductUseCase"""

    def test_delegates_to_service(self, mock_product_service):
        mock_product_service.get_by_id.return_value = Product(id=3, name="Phone", price=1.0)
        assert GetProductUseCase(mock_product_service).execute(3).id == 3
        mock_product_service.get_by_id.assert_called_once_with(3)

    def test_not_found_propagates(self, product_service):
        with pytest.raises(NotFoundError):
            GetProductUseCase(product_service).execute(3)


class TestSetProductStock:
    """Test SetProductStockUseCase"""

    def test_overwrites_stock(self, mock_product_service):
        existing = Product(id=1, name="Phone", price=1000.0, stock=10)
        mock_product_service.get_by_id.return_value = existing
        mock_product_service.save.side_effect = lambda p: p

        result = SetProductStockUseCase(mock_product_service).execute(1, 50)

        assert result.stock == 50
        mock_product_service.get_by_id.assert_called_once_with(1)
        mock_product_service.save.assert_called_once_with(existing)

    def test_negative_quantity_is_rejected(self, mock_product_service):
        with pytest.raises(InvalidArgumentError):
            SetProductStockUseCase(mock_product_service).execute(1, -1)
        mock_product_service.get_by_id.assert_not_called()
        mock_product_service.save.assert_not_called()


class TestDeleteProduct:
    """Test DeleteProductUseCase"""

    def test_returns_true_on_success(self, product_service):
        saved = product_service.save(Product(name="Phone", price=1.0))
        assert DeleteProductUseCase(product_service).execute(saved.id) is True

    def test_returns_false_for_missing_product(self, product_service):
        assert DeleteProductUseCase(product_service).execute(99) is False

    def test_returns_false_for_any_service_failure(self, mock_product_service):
        mock_product_service.delete.side_effect = InvalidArgumentError("boom")
        assert DeleteProductUseCase(mock_product_service).execute(1) is False

    def test_returns_false_for_storage_errors(self, mock_product_service):
        mock_product_service.delete.side_effect = ConnectionError("storage down")
        assert DeleteProductUseCase(mock_product_service).execute(1) is False


class TestUserUseCases:
    """Test the user use cases"""

    def test_get_user(self, mock_user_service):
        user = User(id=1, name="João Silva", email="joao@exemplo.com")
        mock_user_service.get_by_id.return_value = user

        result = GetUserUseCase(mock_user_service).execute(1)

        assert result.name == "João Silva"
        assert result.email == "joao@exemplo.com"
        mock_user_service.get_by_id.assert_called_once_with(1)

    def test_get_user_not_found_propagates(self, mock_user_service):
        mock_user_service.get_by_id.side_effect = NotFoundError("User not found")

        with pytest.raises(NotFoundError, match="User not found"):
            GetUserUseCase(mock_user_service).execute(999)

    def test_create_user(self, mock_user_service):
        user = User(id=1, name="João Silva", email="joao@exemplo.com")
        mock_user_service.save.return_value = user

        assert CreateUserUseCase(mock_user_service).execute(user).id == 1
        mock_user_service.save.assert_called_once_with(user)

    def test_update_overwrites_only_supplied_fields(self, user_service):
        saved = user_service.save(User(name="Joana", email="j@example.com"))

        updated = UpdateUserUseCase(user_service).execute(saved.id, name="Jo")

        assert updated.name == "Jo"
        assert updated.email == "j@example.com"

    def test_update_missing_user_raises_not_found(self, user_service):
        with pytest.raises(NotFoundError):
            UpdateUserUseCase(user_service).execute(10, name="Jo")

    def test_update_does_not_recheck_email_uniqueness(self, user_service):
        user_service.save(User(name="Joana", email="j@example.com"))
        other = user_service.save(User(name="Other", email="o@example.com"))

        updated = UpdateUserUseCase(user_service).execute(other.id, email="j@example.com")

        # update_partial would reject this; the controller-level update does not
        assert updated.email == "j@example.com"

    def test_update_with_blank_name_is_rejected_by_service(self, user_service):
        saved = user_service.save(User(name="Joana", email="j@example.com"))
        with pytest.raises(InvalidArgumentError):
            UpdateUserUseCase(user_service).execute(saved.id, name=" ")

    def test_delete_user_reports_outcome(self, user_service):
        saved = user_service.save(User(name="Joana", email="j@example.com"))
        use_case = DeleteUserUseCase(user_service)
        assert use_case.execute(saved.id) is True
        assert use_case.execute(saved.id) is False

    def test_delete_user_storage_error_reports_false(self, mock_user_service):
        mock_user_service.delete.side_effect = ConnectionError("storage down")
        assert DeleteUserUseCase(mock_user_service).execute(1) is False
