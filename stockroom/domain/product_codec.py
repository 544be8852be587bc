from __future__ import annotations

"""Property-map schema used to persist ``Product`` values in a collection store.

The same keys are written on insert/update and read on get:

    name, category, price, stock, discontinued

The product id is the element key and is not duplicated into the properties.
"""

from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping, Tuple

from .entities import Product
from .errors import RepositoryError

KEY_NAME = "name"
KEY_CATEGORY = "category"
KEY_PRICE = "price"
KEY_STOCK = "stock"
KEY_DISCONTINUED = "discontinued"

PRODUCT_KEYS: Tuple[str, ...] = (
    KEY_NAME,
    KEY_CATEGORY,
    KEY_PRICE,
    KEY_STOCK,
    KEY_DISCONTINUED,
)

_TRUE = "true"
_FALSE = "false"


def encode_product(product: Product) -> Dict[str, str]:
    """Flatten ``product`` into the string property map stored per element."""

    return {
        KEY_NAME: product.name,
        KEY_CATEGORY: product.category,
        KEY_PRICE: str(product.unit_price),
        KEY_STOCK: str(product.units_in_stock),
        KEY_DISCONTINUED: _TRUE if product.discontinued else _FALSE,
    }


def decode_product(product_id: int, properties: Mapping[str, str]) -> Product:
    """Rebuild a ``Product`` from stored properties.

    Raises:
        RepositoryError: A key is missing or a value cannot be parsed.
    """

    missing = [key for key in PRODUCT_KEYS if key not in properties]
    if missing:
        raise RepositoryError(
            message=f"Stored product {product_id} is missing properties: {', '.join(missing)}",
            meta={"missing": missing},
        )

    try:
        unit_price = Decimal(properties[KEY_PRICE].strip())
        units_in_stock = int(properties[KEY_STOCK].strip())
    except (InvalidOperation, ValueError, AttributeError) as exc:
        raise RepositoryError(
            message=f"Stored product {product_id} has malformed numbers."
        ) from exc
    if not unit_price.is_finite():
        raise RepositoryError(message=f"Stored product {product_id} has a non-finite price.")

    return Product(
        id=product_id,
        name=properties[KEY_NAME],
        category=properties[KEY_CATEGORY],
        unit_price=unit_price,
        units_in_stock=units_in_stock,
        discontinued=_parse_bool(product_id, properties[KEY_DISCONTINUED]),
    )


def _parse_bool(product_id: int, raw: str) -> bool:
    text = (raw or "").strip().lower()
    if text == _TRUE:
        return True
    if text == _FALSE:
        return False
    raise RepositoryError(message=f"Stored product {product_id} has malformed flag: {raw!r}")


__all__ = ["PRODUCT_KEYS", "decode_product", "encode_product"]
