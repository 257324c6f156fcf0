"""
account.py – Signed, read-only account queries for USD-M futures.

Every call adds ``timestamp`` (and ``recvWindow`` when configured) to the
payload before the client signs it.
"""

from __future__ import annotations

from typing import Optional

from ..api import Futures
from ..rest import AsyncClient
from ..types import AccountBalance, AccountInformation, PositionRisk
from ..util import build_signed_request


class FuturesAccount:
    """
    Parameters
    ----------
    client      : AsyncClient holding both API and secret keys
    recv_window : Milliseconds the request stays valid after ``timestamp``;
                  0 leaves the exchange default
    """

    def __init__(self, client: AsyncClient, recv_window: int = 0) -> None:
        self.client      = client
        self.recv_window = recv_window

    async def account_balance(self) -> list[AccountBalance]:
        request = build_signed_request({}, self.recv_window)
        return await self.client.get_signed(Futures.BALANCE, request, response_type=list[AccountBalance])

    async def account_information(self) -> AccountInformation:
        """Margin totals, per-asset balances and positions."""
        request = build_signed_request({}, self.recv_window)
        return await self.client.get_signed(Futures.ACCOUNT, request, response_type=AccountInformation)

    async def position_information(self, symbol: Optional[str] = None) -> list[PositionRisk]:
        """Position risk for one symbol, or every symbol when ``symbol`` is None."""
        params = {"symbol": symbol.upper() if symbol else None}
        request = build_signed_request(params, self.recv_window)
        return await self.client.get_signed(Futures.POSITION_RISK, request, response_type=list[PositionRisk])
