from collections.abc import MutableMapping
from typing import Any

from .base import ExchangeRateDecoder


class BitPayDecoder(ExchangeRateDecoder):
    """Array of ``{"code": ..., "rate": ...}`` objects."""

    source = 'bitpay'

    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        entries = self._require_array(value, '$')

        for index, entry in enumerate(entries):
            field = f'[{index}]'
            entry = self._require_object(entry, field)
            code = self._require_string(entry.get('code'), f'{field}.code')
            self._store(cache, code, self._require_price(entry.get('rate'), f'{field}.rate'))
