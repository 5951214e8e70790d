from collections.abc import MutableMapping
from typing import Any

from domain.exceptions.rates import ProviderError

from .base import ExchangeRateDecoder


class CoinMarketCapDecoder(ExchangeRateDecoder):
    """v2 ticker document: ``data.quotes.<CODE>.price``.

    The in-band ``metadata.error`` field is checked before any price is read.
    """

    source = 'coinmarketcap'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        document = self._require_object(value, '$')
        metadata = self._require_object(document.get('metadata'), 'metadata')

        error = metadata.get('error')
        if error is not None:
            raise ProviderError(f'CoinMarketCap returned error: {error}')

        data = self._require_object(document.get('data'), 'data')
        quotes = self._require_object(data.get('quotes'), 'data.quotes')

        for currency, quote in quotes.items():
            field = f'data.quotes.{currency}'
            quote = self._require_object(quote, field)
            self._store(cache, currency, self._require_price(quote.get('price'), f'{field}.price'))
