"""Tests for response records — decoding documented Coinbase payloads."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.types import (
    EditOrder,
    Granularity,
    Product,
    ProductBook,
    ServerTime,
)


class TestServerTime:
    def test_camel_case_aliases(self) -> None:
        t = ServerTime.model_validate(
            {"iso": "2023-11-14T22:13:20Z", "epochSeconds": "1700000000", "epochMillis": "1"}
        )
        assert t.epoch_seconds == "1700000000"
        assert t.model_dump(by_alias=True)["epochMillis"] == "1"

    def test_populate_by_name(self) -> None:
        t = ServerTime(iso="x", epoch_seconds="1", epoch_millis="2")
        assert t.epoch_millis == "2"


class TestProduct:
    def test_minimal_product(self) -> None:
        p = Product.model_validate({"product_id": "BTC-USD"})
        assert p.price == ""
        assert p.future_product_details is None

    def test_missing_product_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product.model_validate({"price": "1"})

    def test_perpetual_future(self) -> None:
        p = Product.model_validate(
            {
                "product_id": "BIP-20DEC30-CDE",
                "product_type": "FUTURE",
                "fcm_trading_session_details": {
                    "is_session_open": True,
                    "maintenance": {"start_time": "a", "end_time": "b"},
                },
                "future_product_details": {
                    "contract_expiry_type": "PERPETUAL",
                    "perpetual_details": {"funding_rate": "0.000004", "max_leverage": "10"},
                },
            }
        )
        assert p.fcm_trading_session_details is not None
        assert p.fcm_trading_session_details.maintenance is not None
        assert p.fcm_trading_session_details.maintenance.end_time == "b"
        details = p.future_product_details
        assert details is not None and details.perpetual_details is not None
        assert details.perpetual_details.max_leverage == "10"


class TestProductBook:
    def test_levels_are_decimal(self) -> None:
        book = ProductBook.model_validate(
            {"pricebook": {"product_id": "BTC-USD", "bids": [{"price": "1.5", "size": "2"}]}}
        )
        assert book.pricebook.bids[0].price == Decimal("1.5")
        assert book.pricebook.asks == []


class TestEditOrder:
    def test_with_errors(self) -> None:
        result = EditOrder.model_validate(
            {
                "success": False,
                "errors": [{"edit_failure_reason": "ORDER_NOT_FOUND"}],
            }
        )
        assert not result.success
        assert result.errors[0].edit_failure_reason == "ORDER_NOT_FOUND"
        assert result.errors[0].preview_failure_reason == ""

    def test_success_required(self) -> None:
        with pytest.raises(ValidationError):
            EditOrder.model_validate({"errors": []})


class TestGranularity:
    def test_str_value(self) -> None:
        assert str(Granularity.FIVE_MINUTE) == "FIVE_MINUTE"
