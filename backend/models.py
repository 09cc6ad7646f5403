"""
Pydantic models for orders and shipping quotes.
"""
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from domain.constants import INITIAL_STATUS
from domain.enums import OrderStatus, ShippingPolicy


def _new_order_id() -> str:
    return uuid4().hex[:12]


# ── Order Models ────────────────────────────────────────────────────

class Order(BaseModel):
    """
    An order moving through NEW -> PAID -> SHIPPED.

    status is read-only on the instance: assigning it raises AttributeError.
    services.order_service.pay / ship change it after checking the
    transition, through _set_status.
    """
    model_config = ConfigDict(validate_assignment=True)

    order_id: str = Field(default_factory=_new_order_id, description="Short identifier used in log lines")
    status: OrderStatus = Field(default=INITIAL_STATUS, description="Current lifecycle status")

    def __setattr__(self, name, value):
        if name == "status":
            raise AttributeError("Order.status changes only through order_service.pay / ship")
        super().__setattr__(name, value)

    def _set_status(self, status: OrderStatus) -> None:
        super().__setattr__("status", status)


# ── Shipping Models ─────────────────────────────────────────────────

class ShippingQuote(BaseModel):
    """Price of one parcel under one shipping policy."""
    policy: ShippingPolicy
    weight_kg: float = Field(..., ge=0, allow_inf_nan=False, description="Parcel weight in kilograms")
    cost: float = Field(..., ge=0, allow_inf_nan=False, description="Shipping cost")
