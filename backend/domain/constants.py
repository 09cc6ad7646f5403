"""
Domain constants used across services.
"""

from domain.enums import OrderStatus, ShippingPolicy

INITIAL_STATUS = OrderStatus.NEW

# No operation leaves these statuses
TERMINAL_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED})

# Transition notifications
NOTICE_PAID = "Paid."
NOTICE_SHIPPED = "Shipped."

# Shipping price per kilogram, by policy
RATE_PER_KG = {
    ShippingPolicy.SEDEX: 12,
    ShippingPolicy.PAC: 7,
    ShippingPolicy.MOTOBOY: 5,
}
