"""
Pytest configuration and shared fixtures.

Provides orders in each lifecycle status and a settings guard so tests
that tweak the global settings do not leak into each other.
"""
import pytest

from config import settings
from domain.enums import OrderStatus, ShippingPolicy
from models import Order


# ── Order Fixtures ───────────────────────────────────────────────────


@pytest.fixture
def new_order() -> Order:
    """A freshly created order (NEW)."""
    return Order()


@pytest.fixture
def paid_order() -> Order:
    """An order that has been paid (PAID)."""
    return Order(status=OrderStatus.PAID)


@pytest.fixture
def shipped_order() -> Order:
    """An order that has been shipped (SHIPPED)."""
    return Order(status=OrderStatus.SHIPPED)


@pytest.fixture
def cancelled_order() -> Order:
    """An order in the reserved CANCELLED status (built directly)."""
    return Order(status=OrderStatus.CANCELLED)


# ── Settings Fixtures ────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def restore_default_policy():
    """Reset the configured default shipping policy after each test."""
    original = settings.default_shipping_policy
    yield
    settings.default_shipping_policy = original


@pytest.fixture
def sample_weight_kg() -> float:
    """Parcel weight used by the main.py walkthrough."""
    return 2.0


@pytest.fixture
def all_policies() -> list[ShippingPolicy]:
    return list(ShippingPolicy)
