"""
Shipping service: interchangeable per-kilogram pricing policies.

Each ShippingPolicy maps to a pure weight -> cost function:
    SEDEX    12 per kg
    PAC       7 per kg
    MOTOBOY   5 per kg

Configuration (from .env):
    DEFAULT_SHIPPING_POLICY: policy used when none is given (default sedex)
"""
import logging
import math
from typing import Callable, Optional

from config import settings
from domain.constants import RATE_PER_KG
from domain.enums import ShippingPolicy
from domain.errors import ValidationError
from models import ShippingQuote
from utils.validators import parse_shipping_policy, validate_weight

logger = logging.getLogger(__name__)


def cost_function(policy: ShippingPolicy | str) -> Callable[[float], float]:
    """
    Return the pricing function for a policy.

    The returned function validates its weight and raises ValidationError
    for a bad weight or a cost too large to represent.
    """
    rate = RATE_PER_KG[parse_shipping_policy(policy)]

    def cost(weight_kg: float) -> float:
        weight = validate_weight(weight_kg)
        price = weight * rate
        if not math.isfinite(price):
            raise ValidationError(f"cost overflows for weight {weight}", field="weight_kg")
        return price

    return cost


def shipping_cost(weight_kg: float, policy: Optional[ShippingPolicy | str] = None) -> float:
    """
    Price a parcel.

    Args:
        weight_kg: Parcel weight in kilograms (finite, >= 0)
        policy: Shipping policy or its name; None uses settings.default_shipping_policy

    Returns:
        The shipping cost

    Raises:
        ValidationError for a bad weight or an unknown policy
    """
    return quote_shipping(weight_kg, policy).cost


def quote_shipping(weight_kg: float, policy: Optional[ShippingPolicy | str] = None) -> ShippingQuote:
    """Price a parcel and return the full quote."""
    weight = validate_weight(weight_kg)
    resolved = parse_shipping_policy(policy if policy is not None else settings.default_shipping_policy)
    cost = cost_function(resolved)(weight)
    logger.debug(f"Quoted {weight} kg via {resolved.value}: {cost}")
    return ShippingQuote(policy=resolved, weight_kg=weight, cost=cost)


class ShippingCalculator:
    """Prices parcels with a policy that can be swapped at runtime."""

    def __init__(self, policy: Optional[ShippingPolicy | str] = None):
        self._policy = parse_shipping_policy(policy if policy is not None else settings.default_shipping_policy)

    @property
    def policy(self) -> ShippingPolicy:
        return self._policy

    def set_policy(self, policy: ShippingPolicy | str) -> None:
        new_policy = parse_shipping_policy(policy)
        if new_policy != self._policy:
            logger.info(f"Shipping policy changed: {self._policy.value} -> {new_policy.value}")
        self._policy = new_policy

    def calculate(self, weight_kg: float) -> float:
        return shipping_cost(weight_kg, self._policy)
