from collections.abc import MutableMapping
from typing import Any

from .base import ExchangeRateDecoder


class BlockchainInfoDecoder(ExchangeRateDecoder):
    source = 'blockchaininfo'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        document = self._require_object(value, '$')

        # Unlike BitcoinAverage every key is a currency, there is no timestamp.
        for currency, ticker in document.items():
            ticker = self._require_object(ticker, currency)
            self._store(cache, currency, self._require_price(ticker.get('last'), f'{currency}.last'))
