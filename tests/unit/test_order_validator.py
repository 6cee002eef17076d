"""
Tests for OrderValidator - Business rule checks.

These tests use a mock product repository to observe stock lookups.
"""

from unittest.mock import Mock

import pytest

from order_placement.business_logic.services.order_validator import OrderValidator
from order_placement.domain.entities import Order
from order_placement.domain.enums import ValidationRule
from order_placement.domain.exceptions import ValidationFailedError
from order_placement.domain.value_objects import OrderItem, Product

NOT_UNIQUE = "Order Items are not unique by product."
OUT_OF_STOCK = "Some products are out of stock."


class TestOrderValidator:
    """Test order validation rules."""

    @pytest.fixture
    def mock_repository(self):
        """Create mock product repository reporting everything in stock."""
        repository = Mock()
        repository.is_in_stock.return_value = True
        return repository

    @pytest.fixture
    def validator(self, mock_repository):
        """Create validator with mock repository."""
        return OrderValidator(mock_repository)

    @pytest.fixture
    def duplicate_order(self):
        """Order with two items for the same product."""
        product = Product("SKU-1", 5)
        return Order.of(1, [OrderItem(product, 1), OrderItem(product, 2)])

    def test_valid_order_has_no_reasons(self, validator, valid_order):
        """Unique in-stock items should pass."""
        assert validator.validate(valid_order) == []

    def test_checks_stock_for_every_item(self, validator, mock_repository, valid_order):
        """Each SKU should be looked up when all are in stock."""
        validator.validate(valid_order)

        looked_up = [c.args[0] for c in mock_repository.is_in_stock.call_args_list]
        assert looked_up == ["SKU-1", "SKU-2", "SKU-3"]

    def test_duplicate_products(self, validator, duplicate_order):
        """Duplicate SKUs should report the uniqueness reason."""
        assert validator.validate(duplicate_order) == [NOT_UNIQUE]

    def test_duplicate_products_skip_stock_lookup(self, validator, mock_repository, duplicate_order):
        """An order already known to be invalid should not reach the repository."""
        validator.validate(duplicate_order)

        mock_repository.is_in_stock.assert_not_called()

    def test_out_of_stock(self, validator, mock_repository, valid_order):
        """Any out-of-stock product should report the stock reason."""
        mock_repository.is_in_stock.side_effect = lambda sku: sku != "SKU-2"

        assert validator.validate(valid_order) == [OUT_OF_STOCK]

    def test_stock_check_stops_at_first_missing(self, validator, mock_repository, valid_order):
        """Stock lookups should stop once one product is out of stock."""
        mock_repository.is_in_stock.return_value = False

        validator.validate(valid_order)

        mock_repository.is_in_stock.assert_called_once_with("SKU-1")

    def test_empty_order(self, validator, mock_repository):
        """An order without items should be rejected."""
        reasons = validator.validate(Order(customer_id=1))

        assert reasons == [ValidationRule.HAS_ITEMS.reason]
        mock_repository.is_in_stock.assert_not_called()

    def test_assert_valid_passes(self, validator, valid_order):
        """A valid order should not raise."""
        validator.assert_valid(valid_order)

    def test_assert_valid_raises_with_reasons(self, validator, mock_repository, valid_order):
        """An invalid order should raise with every reason."""
        mock_repository.is_in_stock.return_value = False

        with pytest.raises(ValidationFailedError) as exc_info:
            validator.assert_valid(valid_order)

        assert exc_info.value.reasons == (OUT_OF_STOCK,)

    def test_all_products_are_in_stock(self, validator, mock_repository, valid_order):
        """Stock predicate should reflect the repository."""
        assert validator.all_products_are_in_stock(valid_order) is True

        mock_repository.is_in_stock.return_value = False
        assert validator.all_products_are_in_stock(valid_order) is False
