from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.entities import Product
from stockroom.domain.ports import CollectionName, CollectionStorePort, ProductRepositoryPort
from stockroom.usecases.add_product import AddProduct
from stockroom.usecases.get_product import GetProduct
from stockroom.usecases.remove_product import RemoveProduct
from stockroom.usecases.update_product import UpdateProduct


@dataclass
class ProductRepository(ProductRepositoryPort):
    """Product operations over one collection of a collection store.

    Each method awaits its store calls one at a time and raises a
    ``UseCaseError`` subclass on the first non-success result. The repository
    holds no locks; the store serializes access.
    """

    store: CollectionStorePort
    collection_name: CollectionName = "products"
    _add: AddProduct = field(init=False, repr=False)
    _get: GetProduct = field(init=False, repr=False)
    _remove: RemoveProduct = field(init=False, repr=False)
    _update: UpdateProduct = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._add = AddProduct(self.store, self.collection_name)
        self._get = GetProduct(self.store, self.collection_name)
        self._remove = RemoveProduct(self.store, self.collection_name)
        self._update = UpdateProduct(self.store, self.collection_name)

    async def add(self, product: Product) -> int:
        return await self._add(product)

    async def get(self, product_id: int) -> Product:
        return await self._get(product_id)

    async def remove(self, product_id: int) -> None:
        await self._remove(product_id)

    async def update(self, product: Product) -> None:
        await self._update(product)
