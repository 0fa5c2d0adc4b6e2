"""Utility functions"""

from app.utils.validators import validate_object_id, parse_object_id
from app.utils.sample_products import SAMPLE_PRODUCTS

__all__ = ["validate_object_id", "parse_object_id", "SAMPLE_PRODUCTS"]
