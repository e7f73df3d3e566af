"""
Use case: Place a paper trade.

Input: PlaceOrderCommand (symbol, qty, side, type, time_in_force, limit_price?)
Output: Order (brokerage acknowledgement)
Side effects: Submits an order to the brokerage.
Failure cases: InvalidOrderError, TradeExecutionError.
"""

import logging

from app.application.market.dtos import PlaceOrderCommand
from app.domain.market.entities import Order, OrderRequest, OrderSide, OrderType, TimeInForce
from app.domain.market.errors import InvalidOrderError
from app.domain.market.ports import BrokeragePort

logger = logging.getLogger(__name__)


def _parse_enum(enum_cls, value: str, field_name: str):
    try:
        return enum_cls(value.lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidOrderError(f"{field_name} must be one of {allowed}") from None


class PlaceOrderUseCase:
    """Validates an order and forwards it to the brokerage.

    Fills, balances and positions are entirely the brokerage's business;
    nothing is simulated locally.
    """

    def __init__(self, brokerage: BrokeragePort) -> None:
        self._brokerage = brokerage

    def execute(self, command: PlaceOrderCommand) -> Order:
        """Run the order placement use case.

        Args:
            command: The order as entered by the user.

        Returns:
            The order as acknowledged by the brokerage.

        Raises:
            InvalidOrderError: Non-positive quantity, unknown side/type/tif,
                or a limit order without a positive limit price.
        """
        if command.qty <= 0:
            raise InvalidOrderError("qty must be greater than 0")

        order_type = _parse_enum(OrderType, command.type, "type")
        if order_type is OrderType.LIMIT and (
            command.limit_price is None or command.limit_price <= 0
        ):
            raise InvalidOrderError("limitPrice is required for limit orders")

        order = OrderRequest(
            symbol=command.symbol.upper(),
            qty=command.qty,
            side=_parse_enum(OrderSide, command.side, "side"),
            type=order_type,
            time_in_force=_parse_enum(TimeInForce, command.time_in_force, "timeInForce"),
            limit_price=command.limit_price if order_type is OrderType.LIMIT else None,
        )

        logger.info(
            "Submitting %s %s order: symbol=%s qty=%s",
            order.type.value,
            order.side.value,
            order.symbol,
            order.qty,
        )
        placed = self._brokerage.submit_order(order)
        logger.info("Order id=%s accepted with status=%s", placed.id, placed.status)
        return placed
