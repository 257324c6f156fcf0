"""
tests/test_types.py – Pydantic v2 model validation tests.

All tests run offline.  They verify that:
  1. camelCase wire payloads populate snake_case fields.
  2. Snake_case construction works too.
  3. Unknown fields are ignored.
  4. Missing required fields raise ValidationError.
  5. Order book levels are parsed from [price, qty] pairs.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from binance_sdk.types import (
    Empty,
    ExchangeErrorBody,
    ExchangeInformation,
    ListenKey,
    OrderBook,
    PositionRisk,
    ServerTime,
    Symbol,
)


class TestAliases:
    def test_wire_names(self) -> None:
        assert ServerTime.model_validate({"serverTime": 5}).server_time == 5

    def test_python_names(self) -> None:
        assert ServerTime(server_time=5).server_time == 5

    def test_listen_key(self) -> None:
        assert ListenKey.model_validate({"listenKey": "abc"}).listen_key == "abc"

    def test_un_realized_profit(self) -> None:
        position = PositionRisk.model_validate({
            "symbol": "BTCUSDT", "positionAmt": "1", "entryPrice": "1",
            "markPrice": "1", "unRealizedProfit": "0.5",
        })
        assert position.un_realized_profit == "0.5"
        assert position.position_side == "BOTH"


class TestValidation:
    def test_extra_fields_ignored(self) -> None:
        assert Empty.model_validate({"listenKey": "abc"}) == Empty()

    def test_missing_required(self) -> None:
        with pytest.raises(ValidationError):
            ServerTime.model_validate({})

    def test_error_body(self) -> None:
        err = ExchangeErrorBody.model_validate({"code": -1121, "msg": "Invalid symbol."})
        assert (err.code, err.msg) == (-1121, "Invalid symbol.")

    def test_error_body_requires_code(self) -> None:
        with pytest.raises(ValidationError):
            ExchangeErrorBody.model_validate({"msg": "x"})

    def test_symbol_must_be_non_empty(self) -> None:
        with pytest.raises(ValidationError, match="symbol"):
            Symbol.model_validate({"symbol": "", "status": "TRADING", "baseAsset": "A", "quoteAsset": "B"})

    def test_models_are_frozen(self) -> None:
        t = ServerTime(server_time=1)
        with pytest.raises(ValidationError):
            t.server_time = 2  # type: ignore[misc]

    def test_minimal_exchange_info(self) -> None:
        info = ExchangeInformation.model_validate({"timezone": "UTC", "serverTime": 1})
        assert info.symbols == []


class TestOrderBook:
    def test_pairs_to_levels(self) -> None:
        book = OrderBook.model_validate({
            "lastUpdateId": 1,
            "bids": [["1.0", "2.0"], ["0.9", "3.0"]],
            "asks": [],
        })
        assert [(lvl.price, lvl.qty) for lvl in book.bids] == [("1.0", "2.0"), ("0.9", "3.0")]
        assert book.transaction_time is None

    def test_level_dicts_accepted(self) -> None:
        book = OrderBook.model_validate({"lastUpdateId": 1, "bids": [{"price": "1", "qty": "2"}]})
        assert book.bids[0].qty == "2"
