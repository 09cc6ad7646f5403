"""
Domain enums for the order lifecycle and shipping policies.
"""

from enum import Enum


class OrderStatus(str, Enum):
    NEW = "NEW"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"  # reserved, no operation leads here


class OrderAction(str, Enum):
    PAY = "pay"
    SHIP = "ship"


class ShippingPolicy(str, Enum):
    SEDEX = "sedex"
    PAC = "pac"
    MOTOBOY = "motoboy"
