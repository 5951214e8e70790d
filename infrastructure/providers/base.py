import logging
from collections.abc import MutableMapping

import httpx

from domain.exceptions.rates import NetworkError, ParseError, ProviderError
from infrastructure.decoders import ExchangeRateDecoder


class ExchangeRateProvider:
    """One price feed: an endpoint, the decoder for its schema, and the shared cache."""

    def __init__(
        self,
        name: str,
        fetch_url: str,
        decoder: ExchangeRateDecoder,
        cache: MutableMapping[str, float],
        client: httpx.AsyncClient,
        logger: logging.Logger | None = None,
    ):
        self._name = name
        self._fetch_url = fetch_url
        self._decoder = decoder
        self._cache = cache
        self._client = client
        self.logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def fetch_url(self) -> str:
        return self._fetch_url

    @property
    def decoder(self) -> ExchangeRateDecoder:
        return self._decoder

    async def fetch(self) -> None:
        """Download, parse and decode the feed, then apply it to the shared cache.

        Prices are staged in a scratch mapping and copied into the cache only
        once the whole document decoded, so a failed attempt never leaves a
        partial update behind.
        """
        if not self._fetch_url:
            raise ProviderError(f'{self._name}: provider has no fetch URL')

        try:
            response = await self._client.get(self._fetch_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(f'Failed to fetch from {self._fetch_url}: HTTP {e.response.status_code}')
            raise NetworkError(
                f'{self._name} HTTP error {e.response.status_code}: {e.response.text[:200]}'
            ) from e
        except httpx.RequestError as e:
            self.logger.error(f'Failed to fetch from {self._fetch_url}: {e.__class__.__name__}')
            raise NetworkError(f'{self._name} request failed: {e.__class__.__name__}') from e

        try:
            document = response.json()
        except ValueError as e:
            self.logger.error(f'Failed to decode JSON from {self._fetch_url}: {e}')
            raise ParseError(f'{self._name} returned malformed JSON: {e}') from e

        staged: dict[str, float] = {}
        self._decoder.decode(document, staged)
        self._cache.update(staged)

        self.logger.debug(f'{self._name} supplied {len(staged)} rates')

    def __repr__(self):
        return f'<{self.__class__.__name__}(name={self._name})>'
