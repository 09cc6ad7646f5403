"""
Input validation utilities for the shipping calculator.

Provides reusable validators for parcel weights and shipping policy names.
"""
import math

from domain.enums import ShippingPolicy
from domain.errors import ValidationError


def validate_weight(weight_kg) -> float:
    """
    Validate a parcel weight.

    Args:
        weight_kg: Weight in kilograms (int or float)

    Returns:
        The weight as a float

    Raises:
        ValidationError if the weight is missing, not a number, not finite or negative
    """
    if weight_kg is None:
        raise ValidationError("Weight is required", field="weight_kg")

    if isinstance(weight_kg, bool) or not isinstance(weight_kg, (int, float)):
        raise ValidationError(
            f"expected a number, got {type(weight_kg).__name__}",
            field="weight_kg",
        )

    try:
        weight = float(weight_kg)
    except OverflowError:
        raise ValidationError("weight is too large to price", field="weight_kg")

    if not math.isfinite(weight):
        raise ValidationError(f"weight must be finite, got {weight}", field="weight_kg")

    if weight < 0:
        raise ValidationError(f"weight must not be negative, got {weight_kg}", field="weight_kg")

    return weight


def parse_shipping_policy(policy: ShippingPolicy | str) -> ShippingPolicy:
    """
    Resolve a shipping policy from an enum member or a case-insensitive name.

    Raises:
        ValidationError for unknown policy names
    """
    if isinstance(policy, ShippingPolicy):
        return policy

    if isinstance(policy, str):
        try:
            return ShippingPolicy(policy.strip().lower())
        except ValueError:
            pass

    known = ", ".join(p.value for p in ShippingPolicy)
    raise ValidationError(f"unknown shipping policy {policy!r} (expected one of: {known})", field="policy")
