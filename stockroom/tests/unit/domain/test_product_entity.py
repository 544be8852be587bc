from __future__ import annotations

from decimal import Decimal

import pytest

from stockroom.domain.entities import Product, product_problems, validate_product
from stockroom.domain.errors import ProductValidationError, UseCaseError


def test_unit_price_is_coerced_to_decimal() -> None:
    assert Product(unit_price=1.5).unit_price == Decimal("1.5")
    assert Product(unit_price="2.00").unit_price == Decimal("2.00")


@pytest.mark.parametrize("price", ["abc", "Infinity", float("nan")])
def test_non_numeric_price_raises(price) -> None:
    with pytest.raises(ProductValidationError):
        Product(unit_price=price)


def test_valid_product_has_no_problems() -> None:
    product = Product(name="Pen", category="Office", unit_price=Decimal("0"), units_in_stock=0)

    assert product_problems(product) == []
    assert validate_product(product) is product


def test_all_problems_are_reported_together() -> None:
    product = Product(name=" ", category="", unit_price=Decimal("-1"), units_in_stock=-2)

    with pytest.raises(ProductValidationError) as excinfo:
        validate_product(product)

    err = excinfo.value
    assert isinstance(err, UseCaseError)
    assert err.code == "INVALID_PRODUCT"
    assert len(err.meta["problems"]) == 3
    assert "UnitPrice cannot be negative." in err.message


@pytest.mark.parametrize("stock, expected", [(7, 7), (3.0, 3), (" 12 ", 12), ("-4", -4)])
def test_units_in_stock_is_coerced_to_int(stock, expected) -> None:
    value = Product(units_in_stock=stock).units_in_stock

    assert value == expected
    assert type(value) is int


@pytest.mark.parametrize("stock", [2.9, "5.5", "five", True, None, Decimal("1")])
def test_non_integral_stock_raises(stock) -> None:
    with pytest.raises(ProductValidationError) as excinfo:
        Product(name="Pen", category="Office", units_in_stock=stock)

    assert excinfo.value.code == "INVALID_PRODUCT"


def test_stock_reassigned_to_non_int_is_reported() -> None:
    product = Product(name="Pen", category="Office", units_in_stock=1)
    product.units_in_stock = "5"  # type: ignore[assignment]

    assert product_problems(product) == ["UnitsInStock must be an integer."]
    with pytest.raises(ProductValidationError):
        validate_product(product)
