from collections.abc import MutableMapping
from typing import Any

from .base import ExchangeRateDecoder


class BitcoinAverageDecoder(ExchangeRateDecoder):
    """Ticker object keyed by currency code, each entry carrying ``last``."""

    source = 'bitcoinaverage'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        document = self._require_object(value, '$')

        for currency, ticker in document.items():
            if currency == 'timestamp':
                continue
            ticker = self._require_object(ticker, currency)
            self._store(cache, currency, self._require_price(ticker.get('last'), f'{currency}.last'))
