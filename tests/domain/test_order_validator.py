"""Unit tests for the order validators."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.itemized_order import ItemizedOrder
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.validation.order_validator import (
    MAX_ORDER_TOTAL,
    ItemizedOrderValidator,
    OrderValidator,
    StrictOrderValidator,
)


def _order(
    order_id: str | None = "ORD-001",
    customer: str | None = "João Silva",
    items: list[str] | None = None,
    total: str = "150.00",
) -> Order:
    return Order(
        id=order_id,
        customer_name=customer,
        items=["Produto A"] if items is None else items,
        total=Money.of(total),
    )


class TestOrderValidator:

    def test_valid_order_accepted(self):
        assert OrderValidator().validate(_order()) is True

    @pytest.mark.parametrize("order_id", ["", None])
    def test_missing_id_rejected(self, order_id):
        with pytest.raises(ValidationError, match="id and customer name"):
            OrderValidator().validate(_order(order_id=order_id))

    @pytest.mark.parametrize("customer", ["", None])
    def test_missing_customer_rejected(self, customer):
        with pytest.raises(ValidationError, match="id and customer name"):
            OrderValidator().validate(_order(customer=customer))

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            OrderValidator().validate(_order(items=[]))

    def test_zero_total_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            OrderValidator().validate(_order(total="0"))

    def test_identity_checked_before_items_and_total(self):
        with pytest.raises(ValidationError, match="id and customer name"):
            OrderValidator().validate(_order(order_id="", items=[], total="0"))

    def test_items_checked_before_total(self):
        with pytest.raises(ValidationError, match="at least one item"):
            OrderValidator().validate(_order(items=[], total="0"))

    def test_large_total_accepted(self):
        assert OrderValidator().validate(_order(total="15000.00")) is True

    def test_validation_does_not_mutate(self):
        order = _order()
        before = (order.id, order.customer_name, list(order.items), order.total, order.status)
        OrderValidator().validate(order)
        assert (order.id, order.customer_name, order.items, order.total, order.status) == before


class TestStrictOrderValidator:

    def test_ceiling_is_ten_thousand(self):
        assert MAX_ORDER_TOTAL == Money(Decimal("10000.00"))

    def test_total_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            StrictOrderValidator().validate(_order(total="15000.00"))

    def test_total_at_ceiling_accepted(self):
        assert StrictOrderValidator().validate(_order(total="10000.00")) is True

    def test_just_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            StrictOrderValidator().validate(_order(total="10000.01"))

    def test_base_rules_still_apply(self):
        with pytest.raises(ValidationError, match="at least one item"):
            StrictOrderValidator().validate(_order(items=[], total="20000"))

    def test_custom_ceiling(self):
        validator = StrictOrderValidator(max_total=Money.of("100"))
        with pytest.raises(ValidationError, match="exceeds maximum"):
            validator.validate(_order(total="150.00"))

    def test_wraps_injected_base(self):
        validator = StrictOrderValidator(base=ItemizedOrderValidator())
        # ItemizedOrderValidator does not check positivity, so zero passes.
        assert validator.validate(_order(total="0")) is True


class TestItemizedOrderValidator:

    def _order(self, order_id="ORD-001", customer="João Silva"):
        return ItemizedOrder(id=order_id, customer_name=customer)

    def test_order_with_items_accepted(self):
        order = self._order().add_item(Product("P1", "Mouse", Money.of("50")), 1)
        assert ItemizedOrderValidator().validate(order) is True

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            ItemizedOrderValidator().validate(self._order())

    def test_missing_customer_rejected(self):
        with pytest.raises(ValidationError, match="id and customer name"):
            ItemizedOrderValidator().validate(self._order(customer=""))

    def test_zero_quantity_not_checked(self):
        order = self._order().add_item(Product("P1", "Mouse", Money.of("50")), 0)
        assert ItemizedOrderValidator().validate(order) is True


class TestStrictOrderValidatorCurrency:

    def test_usd_order_below_ceiling_accepted(self):
        order = Order("ORD-1", "Ana", ["X"], Money.of("100", "USD"))
        assert StrictOrderValidator().validate(order) is True

    def test_usd_order_above_ceiling_rejected(self):
        order = Order("ORD-1", "Ana", ["X"], Money.of("10000.01", "USD"))
        with pytest.raises(ValidationError, match="exceeds maximum"):
            StrictOrderValidator().validate(order)
