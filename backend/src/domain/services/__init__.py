"""Domain Services - Stateless rules that span entities."""

from .wage_validator import minimum_required, is_compliant, validate_offer

__all__ = ["minimum_required", "is_compliant", "validate_offer"]
