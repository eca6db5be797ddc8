"""Tests for wire encoding of request parameters."""

from datetime import date, datetime, timedelta, timezone

import pytest

from coingecko.client.encoding import (
    LIST_SEPARATOR,
    encode_bool,
    encode_event_date,
    encode_history_date,
    encode_list,
    encode_timestamp,
    encode_value,
    to_unix_timestamp,
)
from coingecko.models.params import (
    CompaniesCoinId,
    DerivativeExchangeOrder,
    DerivativesIncludeTickers,
    MarketsOrder,
    OhlcDays,
    PriceChangePercentage,
    TickersOrder,
)


class TestListEncoding:
    """Test identifier list joining."""

    @pytest.mark.parametrize(
        "ids",
        [
            ["bitcoin"],
            ["bitcoin", "ethereum"],
            ["bitcoin", "ethereum", "tether", "usd-coin", "wrapped-bitcoin"],
        ],
    )
    def test_separator_count(self, ids: list[str]):
        """n identifiers are joined by exactly n-1 encoded commas."""
        encoded = encode_list(ids)

        assert encoded.count(LIST_SEPARATOR) == len(ids) - 1
        assert "," not in encoded
        assert encoded == "%2C".join(ids)

    def test_accepts_any_iterable(self):
        assert encode_list(c for c in ("usd", "eur")) == "usd%2Ceur"

    def test_single_string_is_one_item(self):
        assert encode_list("bitcoin") == "bitcoin"

    def test_enum_items(self):
        windows = [PriceChangePercentage.ONE_HOUR, PriceChangePercentage.SEVEN_DAYS]

        assert encode_list(windows) == "1h%2C7d"

    def test_items_are_quoted(self):
        assert encode_list(["a b", "c&d"]) == "a%20b%2Cc%26d"


class TestScalarEncoding:
    """Test scalar values."""

    def test_bool(self):
        assert encode_bool(True) == "true"
        assert encode_bool(False) == "false"
        assert encode_value(True) == "true"
        assert encode_value(False) == "false"

    def test_int(self):
        assert encode_value(250) == "250"

    def test_string_is_quoted(self):
        assert encode_value("decentralized finance") == "decentralized%20finance"
        assert encode_value("a/b") == "a%2Fb"

    def test_plain_string_passthrough(self):
        assert encode_value("usd") == "usd"


class TestEnumTokens:
    """Each enum variant maps to exactly one fixed wire token."""

    @pytest.mark.parametrize(
        ("variant", "token"),
        [
            (MarketsOrder.MARKET_CAP_DESC, "market_cap_desc"),
            (MarketsOrder.MARKET_CAP_ASC, "market_cap_asc"),
            (MarketsOrder.GECKO_DESC, "gecko_desc"),
            (MarketsOrder.GECKO_ASC, "gecko_asc"),
            (MarketsOrder.VOLUME_DESC, "volume_desc"),
            (MarketsOrder.VOLUME_ASC, "volume_asc"),
            (MarketsOrder.ID_DESC, "id_desc"),
            (MarketsOrder.ID_ASC, "id_asc"),
            (TickersOrder.TRUST_SCORE_ASC, "trust_score_asc"),
            (TickersOrder.TRUST_SCORE_DESC, "trust_score_desc"),
            (TickersOrder.VOLUME_DESC, "volume_desc"),
            (DerivativesIncludeTickers.ALL, "all"),
            (DerivativesIncludeTickers.UNEXPIRED, "unexpired"),
            (DerivativeExchangeOrder.NAME_ASC, "name_asc"),
            (DerivativeExchangeOrder.NAME_DESC, "name_desc"),
            (DerivativeExchangeOrder.OPEN_INTEREST_BTC_ASC, "open_interest_btc_asc"),
            (DerivativeExchangeOrder.OPEN_INTEREST_BTC_DESC, "open_interest_btc_desc"),
            (DerivativeExchangeOrder.TRADE_VOLUME_24H_BTC_ASC, "trade_volume_24h_btc_asc"),
            (DerivativeExchangeOrder.TRADE_VOLUME_24H_BTC_DESC, "trade_volume_24h_btc_desc"),
            (PriceChangePercentage.ONE_HOUR, "1h"),
            (PriceChangePercentage.TWENTY_FOUR_HOURS, "24h"),
            (PriceChangePercentage.SEVEN_DAYS, "7d"),
            (PriceChangePercentage.FOURTEEN_DAYS, "14d"),
            (PriceChangePercentage.THIRTY_DAYS, "30d"),
            (PriceChangePercentage.TWO_HUNDRED_DAYS, "200d"),
            (PriceChangePercentage.ONE_YEAR, "1y"),
            (CompaniesCoinId.BITCOIN, "bitcoin"),
            (CompaniesCoinId.ETHEREUM, "ethereum"),
        ],
    )
    def test_token(self, variant, token: str):
        assert encode_value(variant) == token
        # Stable across calls
        assert encode_value(variant) == encode_value(variant)

    def test_ohlc_days(self):
        assert [encode_value(d) for d in OhlcDays] == ["1", "7", "14", "30", "90", "180", "365"]

    def test_tokens_are_unique_per_enum(self):
        for enum_cls in (MarketsOrder, TickersOrder, DerivativeExchangeOrder, PriceChangePercentage, OhlcDays):
            tokens = [encode_value(v) for v in enum_cls]
            assert len(tokens) == len(set(tokens))


class TestDateEncoding:
    """Test date and timestamp formats."""

    def test_history_date(self):
        assert encode_history_date(date(2024, 3, 9)) == "09-03-2024"

    def test_event_date(self):
        assert encode_event_date(date(2024, 3, 9)) == "2024-03-09"

    def test_naive_datetime_is_utc(self):
        assert to_unix_timestamp(datetime(2024, 1, 1)) == 1704067200
        assert encode_timestamp(datetime(1970, 1, 1)) == "0"

    def test_aware_datetime(self):
        plus_two = timezone(timedelta(hours=2))

        assert to_unix_timestamp(datetime(2024, 1, 1, 2, tzinfo=plus_two)) == 1704067200
        assert to_unix_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc)) == 1704067200

    def test_sub_second_truncated(self):
        assert to_unix_timestamp(datetime(2024, 1, 1, 0, 0, 1, 999999)) == 1704067201

    def test_pure_function_of_input(self):
        """Identical dates convert identically regardless of call order."""
        a = datetime(2023, 6, 1, 12, 30)
        b = datetime(2021, 1, 1)

        first = (to_unix_timestamp(a), to_unix_timestamp(b))
        second = (to_unix_timestamp(b), to_unix_timestamp(a))

        assert first == second[::-1]
