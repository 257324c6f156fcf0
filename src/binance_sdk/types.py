"""
types.py – Pydantic v2 models for Binance REST responses.

Field names are snake_case in Python and camelCase on the wire; every
model accepts either spelling (``populate_by_name``).

All prices, quantities and balances are strings on the wire to preserve
precision; this SDK keeps that convention and stores them as str –
convert with Decimal for arithmetic.

Unknown fields are ignored so additions on the exchange side do not
break deserialisation.

Deserialisation
---------------
Models are normally produced by the client from the response body:

    info = await client.get(Futures.EXCHANGE_INFO, response_type=ExchangeInformation)

They can also be built from raw dicts:

    t = ServerTime.model_validate({"serverTime": 1700000000000})
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# Generic envelopes
# ---------------------------------------------------------------------------

class Empty(_WireModel):
    """Response with no meaningful body (``{}``)."""


class ExchangeErrorBody(_WireModel):
    """Structured error payload returned with HTTP 400."""
    code: int
    msg:  str


class ServerTime(_WireModel):
    server_time: int


class ListenKey(_WireModel):
    listen_key: str


# ---------------------------------------------------------------------------
# Exchange information
# ---------------------------------------------------------------------------

class RateLimit(_WireModel):
    rate_limit_type: str
    interval:        str
    interval_num:    int
    limit:           int


class Asset(_WireModel):
    asset:               str
    margin_available:    bool          = False
    auto_asset_exchange: Optional[str] = None


class Symbol(_WireModel):
    """Trading rules for one futures contract."""
    symbol:                  str
    pair:                    str = ""
    contract_type:           str = ""
    delivery_date:           int = 0
    onboard_date:            int = 0
    status:                  str
    maint_margin_percent:    str = "0"
    required_margin_percent: str = "0"
    base_asset:              str
    quote_asset:             str
    margin_asset:            str = ""
    price_precision:         int = 0
    quantity_precision:      int = 0
    base_asset_precision:    int = 0
    quote_precision:         int = 0
    underlying_type:         str = ""
    trigger_protect:         str = "0"
    filters:                 list[dict[str, Any]] = []
    order_types:             list[str]            = []
    time_in_force:           list[str]            = []

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        if not v:
            raise ValueError("symbol must be non-empty")
        return v


class ExchangeInformation(_WireModel):
    timezone:         str
    server_time:      int
    futures_type:     str                   = ""
    rate_limits:      list[RateLimit]       = []
    exchange_filters: list[dict[str, Any]]  = []
    assets:           list[Asset]           = []
    symbols:          list[Symbol]          = []


# ---------------------------------------------------------------------------
# Market data
# ---------------------------------------------------------------------------

class PriceLevel(_WireModel):
    price: str
    qty:   str


class OrderBook(_WireModel):
    """L2 depth snapshot.  Levels arrive as ``["price", "qty"]`` pairs."""
    last_update_id:      int
    message_output_time: Optional[int] = Field(default=None, alias="E")
    transaction_time:    Optional[int] = Field(default=None, alias="T")
    bids:                list[PriceLevel] = []
    asks:                list[PriceLevel] = []

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def parse_levels(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [
                {"price": lvl[0], "qty": lvl[1]} if isinstance(lvl, (list, tuple)) else lvl
                for lvl in v
            ]
        return v


class Trade(_WireModel):
    id:             int
    price:          str
    qty:            str
    quote_qty:      str = "0"
    time:           int
    is_buyer_maker: bool


class SymbolPrice(_WireModel):
    symbol: str
    price:  str
    time:   Optional[int] = None


class BookTicker(_WireModel):
    symbol:    str
    bid_price: str
    bid_qty:   str
    ask_price: str
    ask_qty:   str
    time:      Optional[int] = None


class PremiumIndex(_WireModel):
    symbol:                  str
    mark_price:              str
    index_price:             str
    estimated_settle_price:  str = "0"
    last_funding_rate:       str = "0"
    interest_rate:           str = "0"
    next_funding_time:       int = 0
    time:                    int


class OpenInterest(_WireModel):
    symbol:        str
    open_interest: str
    time:          int


# ---------------------------------------------------------------------------
# Account (signed)
# ---------------------------------------------------------------------------

class AccountBalance(_WireModel):
    account_alias:        str  = ""
    asset:                str
    balance:              str
    cross_wallet_balance: str  = "0"
    cross_un_pnl:         str  = "0"
    available_balance:    str  = "0"
    max_withdraw_amount:  str  = "0"
    margin_available:     bool = False
    update_time:          int  = 0


class AccountAsset(_WireModel):
    asset:                    str
    wallet_balance:           str
    unrealized_profit:        str = "0"
    margin_balance:           str = "0"
    maint_margin:             str = "0"
    initial_margin:           str = "0"
    available_balance:        str = "0"
    max_withdraw_amount:      str = "0"
    update_time:              int = 0


class AccountPosition(_WireModel):
    symbol:            str
    initial_margin:    str = "0"
    maint_margin:      str = "0"
    unrealized_profit: str = "0"
    leverage:          str = "0"
    isolated:          bool = False
    entry_price:       str = "0"
    position_side:     str = "BOTH"
    position_amt:      str = "0"
    update_time:       int = 0


class AccountInformation(_WireModel):
    fee_tier:                int  = 0
    can_trade:               bool = False
    can_deposit:             bool = False
    can_withdraw:            bool = False
    update_time:             int  = 0
    total_initial_margin:    str  = "0"
    total_maint_margin:      str  = "0"
    total_wallet_balance:    str  = "0"
    total_unrealized_profit: str  = "0"
    total_margin_balance:    str  = "0"
    available_balance:       str  = "0"
    max_withdraw_amount:     str  = "0"
    assets:                  list[AccountAsset]    = []
    positions:               list[AccountPosition] = []


class PositionRisk(_WireModel):
    symbol:            str
    position_amt:      str
    entry_price:       str
    mark_price:        str
    un_realized_profit: str
    liquidation_price: str = "0"
    leverage:          str = "0"
    margin_type:       str = "cross"
    isolated_margin:   str = "0"
    position_side:     str = "BOTH"
    update_time:       int = 0
