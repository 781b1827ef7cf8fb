"""Request validators built from ordered rule lists."""

from catalog_api.validators.book_validator import BookValidator
from catalog_api.validators.order_validator import OrderValidator
from catalog_api.validators.product_validator import ProductValidator
from catalog_api.validators.rules import Rule, RuleSetValidator, ValidationResult

__all__ = [
    "BookValidator",
    "OrderValidator",
    "ProductValidator",
    "Rule",
    "RuleSetValidator",
    "ValidationResult",
]
