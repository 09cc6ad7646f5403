"""
Order-shipping walkthrough.

Runs one order through its lifecycle (pay, then ship) and prices a 2 kg
parcel under SEDEX, then again after switching the calculator to MOTOBOY.

Usage (from backend/):
    python main.py
"""
import logging

from config import settings
from domain.enums import ShippingPolicy
from models import Order
from services import order_service
from services.shipping_service import ShippingCalculator

logger = logging.getLogger(__name__)

DEMO_WEIGHT_KG = 2


def configure_logging():
    """Validate settings and set up the root logger."""
    settings.validate_settings()
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_demo() -> dict:
    """Run the walkthrough and return what happened."""
    order = Order()
    logger.info(f"Created order {order.order_id} ({order.status.value})")
    order_service.pay(order)
    order_service.ship(order)

    calculator = ShippingCalculator(ShippingPolicy.SEDEX)
    sedex_cost = calculator.calculate(DEMO_WEIGHT_KG)
    logger.info(f"{DEMO_WEIGHT_KG} kg via {calculator.policy.value}: {sedex_cost}")

    calculator.set_policy(ShippingPolicy.MOTOBOY)
    motoboy_cost = calculator.calculate(DEMO_WEIGHT_KG)
    logger.info(f"{DEMO_WEIGHT_KG} kg via {calculator.policy.value}: {motoboy_cost}")

    return {
        "order_id": order.order_id,
        "status": order.status,
        "costs": {
            ShippingPolicy.SEDEX: sedex_cost,
            ShippingPolicy.MOTOBOY: motoboy_cost,
        },
    }


if __name__ == "__main__":
    configure_logging()
    run_demo()
