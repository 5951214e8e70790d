import asyncio
import logging
from collections.abc import Sequence

import httpx

from config.settings import Settings
from domain.exceptions.rates import AllProvidersFailed, UntrackedCurrency
from domain.models.currency import UNITS_PER_COIN, normalize_currency_code
from infrastructure.http import create_http_client
from infrastructure.providers import ExchangeRateProvider, FeedConfig, resolve_feeds

from .rate_refresher import DEFAULT_REFRESH_INTERVAL, RateRefreshWorker


class PriceFetcher:
    """Current coin price in any currency the configured feeds report.

    Feeds are tried in priority order and the first one that succeeds fills
    the rate cache. A single lock guards the cache and the whole fallback
    loop, so refreshes are serialized and lookups wait for an in-flight
    refresh to finish.
    """

    def __init__(
        self,
        feeds: Sequence[FeedConfig],
        client: httpx.AsyncClient,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.refresh_interval = refresh_interval
        self._client = client
        self._lock = asyncio.Lock()
        self._cache: dict[str, float] = {}
        self._providers = tuple(
            ExchangeRateProvider(
                name=feed.name,
                fetch_url=feed.fetch_url,
                decoder=feed.decoder,
                cache=self._cache,
                client=client,
                logger=logger,
            )
            for feed in feeds
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> 'PriceFetcher':
        client = create_http_client(
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            proxy=settings.PROXY_URL,
            transport=transport,
        )
        feeds = resolve_feeds(settings.RATE_PROVIDERS, settings.provider_urls())
        return cls(
            feeds=feeds,
            client=client,
            refresh_interval=settings.REFRESH_INTERVAL_SECONDS,
            logger=logger,
        )

    @property
    def providers(self) -> tuple[ExchangeRateProvider, ...]:
        return self._providers

    async def get_exchange_rate(self, currency_code: str) -> float:
        """Cached price of one coin in ``currency_code``; never touches the network."""
        currency_code = normalize_currency_code(currency_code)
        async with self._lock:
            return self._lookup(currency_code)

    async def get_latest_rate(self, currency_code: str) -> float:
        currency_code = normalize_currency_code(currency_code)
        await self.refresh()
        async with self._lock:
            return self._lookup(currency_code)

    async def get_all_rates(self, use_cache: bool = True) -> dict[str, float]:
        """Snapshot of every cached rate, refreshed first unless ``use_cache``."""
        if not use_cache:
            await self.refresh()
        async with self._lock:
            return dict(self._cache)

    def units_per_coin(self) -> int:
        return UNITS_PER_COIN

    async def refresh(self) -> None:
        """Fill the cache from the first feed that answers successfully.

        Raises:
            AllProvidersFailed: every feed failed during this call
        """
        async with self._lock:
            errors: dict[str, Exception] = {}
            for provider in self._providers:
                try:
                    await provider.fetch()
                except Exception as e:
                    self.logger.warning(f'Rate provider {provider.name} failed: {e}')
                    errors[provider.name] = e
                    continue

                self.logger.info(f'Exchange rates updated from {provider.name}')
                return

            self.logger.error(
                f'Failed to fetch exchange rates, all {len(errors)} providers failed: '
                + '; '.join(f'{name}: {error}' for name, error in errors.items())
            )
            raise AllProvidersFailed(errors)

    async def run(self) -> None:
        """Refresh now and then every ``refresh_interval`` seconds, forever."""
        await RateRefreshWorker(self, interval=self.refresh_interval, logger=self.logger).run()

    async def close(self) -> None:
        await self._client.aclose()

    def _lookup(self, currency_code: str) -> float:
        price = self._cache.get(currency_code)
        if price is None:
            raise UntrackedCurrency(currency_code)
        return price
