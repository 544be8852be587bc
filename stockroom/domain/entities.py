from __future__ import annotations

"""Domain value objects shared across adapters and use-cases."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, List

from .errors import ProductValidationError


@dataclass
class Product:
    """Catalog entry managed by the product repository."""

    id: int = 0
    """Identifier assigned by the store on add; ignored by ``add``."""
    name: str = ""
    category: str = ""
    unit_price: Decimal = Decimal("0")
    """Price per unit; must not be negative."""
    units_in_stock: int = 0
    """Units on hand; must not be negative."""
    discontinued: bool = False

    def __post_init__(self) -> None:
        self.unit_price = _to_decimal(self.unit_price)
        self.units_in_stock = _to_stock(self.units_in_stock)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # floats go through str(): 1.5 -> Decimal("1.5")
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ProductValidationError(
                message=f"UnitPrice is not a number: {value!r}"
            ) from exc
    if not result.is_finite():
        raise ProductValidationError(message=f"UnitPrice must be finite: {value!r}")
    return result


def _to_stock(value: Any) -> int:
    if isinstance(value, bool):
        raise ProductValidationError(message=f"UnitsInStock must be an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ProductValidationError(message=f"UnitsInStock must be a whole number: {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ProductValidationError(
                message=f"UnitsInStock is not an integer: {value!r}"
            ) from exc
    raise ProductValidationError(message=f"UnitsInStock must be an integer: {value!r}")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def product_problems(product: Product) -> List[str]:
    """Return human-readable invariant violations for ``product`` (empty if valid)."""
    problems: List[str] = []
    if _is_blank(product.name) or _is_blank(product.category):
        problems.append("Name and Category cannot be empty or contain whitespace only.")
    if product.unit_price < 0:
        problems.append("UnitPrice cannot be negative.")
    stock = product.units_in_stock
    if isinstance(stock, bool) or not isinstance(stock, int):
        problems.append("UnitsInStock must be an integer.")
    elif stock < 0:
        problems.append("UnitsInStock cannot be negative.")
    return problems


def validate_product(product: Product) -> Product:
    """Raise ``ProductValidationError`` when ``product`` violates local invariants."""
    problems = product_problems(product)
    if problems:
        raise ProductValidationError(message=" ".join(problems), meta={"problems": problems})
    return product


__all__ = ["Product", "product_problems", "validate_product"]
