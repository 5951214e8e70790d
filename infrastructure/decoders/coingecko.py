from collections.abc import MutableMapping
from typing import Any

from .base import ExchangeRateDecoder


class CoinGeckoDecoder(ExchangeRateDecoder):
    """``/coins/{id}`` document: prices under ``market_data.current_price``.

    CoinGecko keys the price map by lowercase currency code.
    """

    source = 'coingecko'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        document = self._require_object(value, '$')
        market_data = self._require_object(document.get('market_data'), 'market_data')
        current_price = self._require_object(
            market_data.get('current_price'), 'market_data.current_price'
        )

        for currency, price in current_price.items():
            field = f'market_data.current_price.{currency}'
            self._store(cache, currency, self._require_price(price, field))
