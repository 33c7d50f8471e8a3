"""Application service: Process Product use case.

Re-applies the fulfillment policy to a single product looked up by id.
"""

from __future__ import annotations

from fulfillment.application.dto import ProductDTO
from fulfillment.application.process_order import OrderProcessor
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.repository.product_repository import ProductRepository


class ProcessProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        processor: OrderProcessor,
    ) -> None:
        self._product_repo = product_repo
        self._processor = processor

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        updated = self._processor.process_product(product)
        return ProductDTO.from_product(updated)
