from .static_pricing_service import DEFAULT_CATALOG, StaticPricingService

__all__ = ["DEFAULT_CATALOG", "StaticPricingService"]
