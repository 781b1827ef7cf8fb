"""Entity → response derivation."""

from catalog_api.mapping.order_mapping import to_order_profile
from catalog_api.mapping.product_mapping import to_product_profile

__all__ = ["to_order_profile", "to_product_profile"]
