"""
Catalog of known price feeds.

Each feed name maps to the decoder for its schema. Adding a feed means adding
a decoder here and a URL to the settings; the priority list in
``RATE_PROVIDERS`` decides which feeds are tried and in what order.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from infrastructure.decoders import (
    BitcoinAverageDecoder,
    BitcoinChartsDecoder,
    BitPayDecoder,
    BlockchainInfoDecoder,
    CoinGeckoDecoder,
    CoinMarketCapDecoder,
    ExchangeRateDecoder,
)

logger = logging.getLogger(__name__)

DECODERS: dict[str, type[ExchangeRateDecoder]] = {
    'coingecko': CoinGeckoDecoder,
    'coinmarketcap': CoinMarketCapDecoder,
    'bitcoinaverage': BitcoinAverageDecoder,
    'bitpay': BitPayDecoder,
    'blockchaininfo': BlockchainInfoDecoder,
    'bitcoincharts': BitcoinChartsDecoder,
}


@dataclass(frozen=True)
class FeedConfig:
    name: str
    fetch_url: str
    decoder: ExchangeRateDecoder


def resolve_feeds(names: Iterable[str], urls: dict[str, str]) -> list[FeedConfig]:
    """Feed configs for ``names``, kept in the given priority order."""
    feeds = []
    for name in names:
        name = name.strip().lower()
        decoder_cls = DECODERS.get(name)
        if decoder_cls is None:
            raise KeyError(f"Unknown rate provider '{name}'. Available: {list(DECODERS)}")

        feeds.append(FeedConfig(name=name, fetch_url=urls.get(name, ''), decoder=decoder_cls()))
        logger.debug('Configured rate provider %s', name)
    return feeds
