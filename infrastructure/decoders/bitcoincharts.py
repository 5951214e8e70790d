from collections.abc import MutableMapping
from typing import Any

from .base import ExchangeRateDecoder


class BitcoinChartsDecoder(ExchangeRateDecoder):
    """Weighted prices keyed by currency; the ``24h`` price is a string.

    Currencies without a ``24h`` average are skipped.
    """

    source = 'bitcoincharts'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        document = self._require_object(value, '$')

        for currency, prices in document.items():
            if currency == 'timestamp':
                continue
            prices = self._require_object(prices, currency)
            if '24h' not in prices:
                continue

            field = f'{currency}.24h'
            raw = self._require_string(prices['24h'], field)
            try:
                price = float(raw)
            except ValueError as e:
                raise self._mismatch(field, f'is not a decimal string ({raw!r})') from e
            self._store(cache, currency, self._check_price(price, field))
