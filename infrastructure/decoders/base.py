import math
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any

from domain.exceptions.rates import SchemaMismatch
from domain.models.currency import normalize_currency_code


class ExchangeRateDecoder(ABC):
    """Turns one provider's JSON document into ``code -> price`` cache entries.

    Decoders are stateless. ``decode`` writes each discovered price into
    ``cache`` as soon as it is validated, so a failure partway through leaves
    the earlier entries in whatever mapping the caller handed in.
    """

    source: str = 'unknown'

    @abstractmethod
    def decode(self, value: Any, cache: MutableMapping[str, float]) -> None:
        ...

    def _mismatch(self, field: str, detail: str = 'missing or mistyped') -> SchemaMismatch:
        return SchemaMismatch(self.source, field, detail)

    def _require_object(self, value: Any, field: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise self._mismatch(field, 'is not a JSON object')
        return value

    def _require_array(self, value: Any, field: str) -> list[Any]:
        if not isinstance(value, list):
            raise self._mismatch(field, 'is not a JSON array')
        return value

    def _require_string(self, value: Any, field: str) -> str:
        if not isinstance(value, str):
            raise self._mismatch(field, 'is not a string')
        return value

    def _require_price(self, value: Any, field: str) -> float:
        # bool is an int subclass, json never yields it for a price
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._mismatch(field, 'is not a number')
        return self._check_price(float(value), field)

    def _check_price(self, price: float, field: str) -> float:
        if not math.isfinite(price) or price < 0:
            raise self._mismatch(field, f'is not a valid price ({price})')
        return price

    @staticmethod
    def _store(cache: MutableMapping[str, float], currency_code: str, price: float) -> None:
        # A zero price means the market has no quote for this currency
        if price == 0:
            return
        cache[normalize_currency_code(currency_code)] = price

    def __repr__(self):
        return f'<{self.__class__.__name__}>'
