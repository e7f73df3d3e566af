"""
Use case: Balances of the brokerage account.

Input: None
Output: Account
Side effects: One brokerage call.
Failure cases: MarketDataError.
"""

from app.domain.market.entities import Account
from app.domain.market.ports import BrokeragePort


class GetAccountUseCase:
    def __init__(self, brokerage: BrokeragePort) -> None:
        self._brokerage = brokerage

    def execute(self) -> Account:
        return self._brokerage.get_account()
