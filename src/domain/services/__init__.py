"""Domain services package."""

from .validation import validate_create, validate_filter, validate_update

__all__ = ["validate_create", "validate_update", "validate_filter"]
