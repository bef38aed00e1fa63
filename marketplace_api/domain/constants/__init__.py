"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields
from .donation_fields import DonationFields

__all__ = [
    "UserFields",
    "ProductFields",
    "DonationFields",
]
