"""Static catalog standing in for an external pricing service."""

from collections.abc import Mapping
from decimal import Decimal

import structlog

from purchase_orders.domain.ordering.value_objects import SKU, Money, normalize_currency
from purchase_orders.domain.ordering.value_objects.money import AmountLike
from purchase_orders.exceptions import PriceNotFoundError

logger = structlog.get_logger(__name__)

DEFAULT_CATALOG: dict[str, dict[str, Decimal]] = {
    "LAPTOP001": {"USD": Decimal("999.99"), "EUR": Decimal("899.99"), "MXN": Decimal("19999.99")},
    "MOUSE001": {"USD": Decimal("29.99"), "EUR": Decimal("24.99"), "MXN": Decimal("599.99")},
    "KEYBOARD001": {"USD": Decimal("79.99"), "EUR": Decimal("69.99"), "MXN": Decimal("1599.99")},
    "MONITOR001": {"USD": Decimal("299.99"), "EUR": Decimal("269.99"), "MXN": Decimal("5999.99")},
    "HEADPHONES001": {
        "USD": Decimal("149.99"),
        "EUR": Decimal("129.99"),
        "MXN": Decimal("2999.99"),
    },
}


class StaticPricingService:
    """
    Pricing service answering from a fixed SKU -> currency -> price table.

    Args:
        catalog: Optional replacement for ``DEFAULT_CATALOG``. SKUs and
            currency codes are normalized the same way the domain does.
    """

    def __init__(self, catalog: Mapping[str, Mapping[str, AmountLike]] | None = None) -> None:
        source = DEFAULT_CATALOG if catalog is None else catalog
        self._prices: dict[str, dict[str, Money]] = {
            SKU(sku).value: {
                normalize_currency(currency): Money.of(amount, currency)
                for currency, amount in prices.items()
            }
            for sku, prices in source.items()
        }

    async def get_unit_price(self, sku: SKU, currency: str) -> Money:
        """
        Get the unit price of a SKU in a currency.

        Raises:
            PriceNotFoundError: If the SKU is unknown or has no price in that currency
        """
        code = normalize_currency(currency)
        price = self._prices.get(sku.value, {}).get(code)
        if price is None:
            logger.info("price_not_found", sku=sku.value, currency=code)
            raise PriceNotFoundError(sku.value, code)
        return price
