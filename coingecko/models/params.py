"""Enumerated request parameters.

Each member's value is the literal token the API expects on the wire.
"""

import enum


class MarketsOrder(str, enum.Enum):
    """Sort order for /coins/markets."""

    MARKET_CAP_DESC = "market_cap_desc"
    MARKET_CAP_ASC = "market_cap_asc"
    GECKO_DESC = "gecko_desc"
    GECKO_ASC = "gecko_asc"
    VOLUME_DESC = "volume_desc"
    VOLUME_ASC = "volume_asc"
    ID_DESC = "id_desc"
    ID_ASC = "id_asc"


class PriceChangePercentage(str, enum.Enum):
    """Extra price-change windows included in /coins/markets rows."""

    ONE_HOUR = "1h"
    TWENTY_FOUR_HOURS = "24h"
    SEVEN_DAYS = "7d"
    FOURTEEN_DAYS = "14d"
    THIRTY_DAYS = "30d"
    TWO_HUNDRED_DAYS = "200d"
    ONE_YEAR = "1y"


class TickersOrder(str, enum.Enum):
    """Sort order for coin and exchange tickers."""

    TRUST_SCORE_ASC = "trust_score_asc"
    TRUST_SCORE_DESC = "trust_score_desc"
    VOLUME_DESC = "volume_desc"


class OhlcDays(int, enum.Enum):
    """Lookback windows accepted by /coins/{id}/ohlc."""

    ONE_DAY = 1
    SEVEN_DAYS = 7
    FOURTEEN_DAYS = 14
    THIRTY_DAYS = 30
    NINETY_DAYS = 90
    ONE_HUNDRED_EIGHTY_DAYS = 180
    THREE_HUNDRED_SIXTY_FIVE_DAYS = 365


class DerivativesIncludeTickers(str, enum.Enum):
    """Which derivative tickers to include. The API default is UNEXPIRED."""

    ALL = "all"
    UNEXPIRED = "unexpired"


class DerivativeExchangeOrder(str, enum.Enum):
    """Sort order for /derivatives/exchanges."""

    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    OPEN_INTEREST_BTC_ASC = "open_interest_btc_asc"
    OPEN_INTEREST_BTC_DESC = "open_interest_btc_desc"
    TRADE_VOLUME_24H_BTC_ASC = "trade_volume_24h_btc_asc"
    TRADE_VOLUME_24H_BTC_DESC = "trade_volume_24h_btc_desc"


class CompaniesCoinId(str, enum.Enum):
    """Coins with public-company treasury data."""

    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
