from typing import Protocol

from purchase_orders.domain.ordering.value_objects import SKU, Money


class PricingServiceProtocol(Protocol):
    async def get_unit_price(self, sku: SKU, currency: str) -> Money:
        """
        Look up the catalog unit price of a SKU.

        Raises:
            PriceNotFoundError: If no price exists for the sku/currency pair
        """
        ...
