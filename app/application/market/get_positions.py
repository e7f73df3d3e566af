"""
Use case: Open positions of the brokerage account.

Input: None
Output: list[Position]
Side effects: One brokerage call.
Failure cases: MarketDataError.
"""

from app.domain.market.entities import Position
from app.domain.market.ports import BrokeragePort


class GetPositionsUseCase:
    def __init__(self, brokerage: BrokeragePort) -> None:
        self._brokerage = brokerage

    def execute(self) -> list[Position]:
        return self._brokerage.get_positions()
