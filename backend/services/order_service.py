"""
Order service: the order status state machine.

Lifecycle:
    NEW --pay--> PAID --ship--> SHIPPED

SHIPPED is terminal. CANCELLED is declared on OrderStatus but no operation
reaches it. Every other (status, action) pair is rejected with
InvalidTransition and leaves the order untouched.

transition() is the pure rule; pay() / ship() apply it to an Order and
emit the "Paid." / "Shipped." notifications on this module's logger.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from domain.constants import NOTICE_PAID, NOTICE_SHIPPED, TERMINAL_STATUSES
from domain.enums import OrderAction, OrderStatus
from domain.errors import InvalidTransition
from models import Order

logger = logging.getLogger(__name__)


# (from_status, action) -> to_status
ALLOWED_TRANSITIONS: dict[tuple[OrderStatus, OrderAction], OrderStatus] = {
    (OrderStatus.NEW, OrderAction.PAY): OrderStatus.PAID,
    (OrderStatus.PAID, OrderAction.SHIP): OrderStatus.SHIPPED,
}

# Specific rejection reasons; anything missing falls back to "order is <STATUS>"
_REJECTION_REASONS: dict[tuple[OrderStatus, OrderAction], str] = {
    (OrderStatus.PAID, OrderAction.PAY): "order already paid",
    (OrderStatus.SHIPPED, OrderAction.PAY): "order already shipped",
    (OrderStatus.NEW, OrderAction.SHIP): "order not paid",
    (OrderStatus.SHIPPED, OrderAction.SHIP): "order already shipped",
}

_NOTICES = {
    OrderAction.PAY: NOTICE_PAID,
    OrderAction.SHIP: NOTICE_SHIPPED,
}


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a transition attempt.

    Attributes:
        ok: Whether the transition is legal
        status: The resulting status if ok, None otherwise
        error: The InvalidTransition describing the rejection, None if ok
    """
    ok: bool
    status: Optional[OrderStatus]
    error: Optional[InvalidTransition]


def transition(status: OrderStatus, action: OrderAction) -> TransitionResult:
    """
    Decide the next status for an action (pure; rejections are returned, not raised).

    Args:
        status: Current order status
        action: The operation being attempted

    Returns:
        TransitionResult with the next status, or with the rejection error.
    """
    status = OrderStatus(status)
    action = OrderAction(action)

    next_status = ALLOWED_TRANSITIONS.get((status, action))
    if next_status is not None:
        return TransitionResult(ok=True, status=next_status, error=None)

    reason = _REJECTION_REASONS.get((status, action), f"order is {status.value}")
    error = InvalidTransition(action, status, f"cannot {action.value}: {reason}")
    return TransitionResult(ok=False, status=None, error=error)


def allowed_actions(status: OrderStatus) -> set[OrderAction]:
    """Actions that are legal from the given status (empty for terminal statuses)."""
    status = OrderStatus(status)
    return {action for (from_status, action) in ALLOWED_TRANSITIONS if from_status == status}


def is_terminal(status: OrderStatus) -> bool:
    return OrderStatus(status) in TERMINAL_STATUSES


def apply_action(order: Order, action: OrderAction) -> Order:
    """
    Apply an action to the order in place.

    On success the order's status is updated and the action's notification
    is logged. On rejection the order is left unchanged and
    InvalidTransition is raised to the caller.
    """
    action = OrderAction(action)
    result = transition(order.status, action)
    if not result.ok:
        logger.warning(f"Order {order.order_id}: {result.error.message}")
        raise result.error

    previous = order.status
    order._set_status(result.status)
    logger.debug(f"Order {order.order_id}: {previous.value} -> {order.status.value}")
    logger.info(_NOTICES[action])
    return order


def pay(order: Order) -> Order:
    """
    Mark a NEW order as PAID.

    Raises:
        InvalidTransition if the order is already paid, already shipped
        or otherwise not NEW.
    """
    return apply_action(order, OrderAction.PAY)


def ship(order: Order) -> Order:
    """
    Mark a PAID order as SHIPPED.

    Raises:
        InvalidTransition if the order is not paid yet or already shipped.
    """
    return apply_action(order, OrderAction.SHIP)
