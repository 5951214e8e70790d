"""
Shared test configuration and fixtures.
"""

import pytest

from infrastructure.decoders import BitcoinAverageDecoder, CoinGeckoDecoder, CoinMarketCapDecoder
from infrastructure.providers import FeedConfig
from tests.helpers import BITCOINAVERAGE_URL, COINGECKO_URL, COINMARKETCAP_URL


@pytest.fixture
def default_feeds():
    """CoinGecko first, CoinMarketCap as fallback, like production."""
    return [
        FeedConfig(name='coingecko', fetch_url=COINGECKO_URL, decoder=CoinGeckoDecoder()),
        FeedConfig(name='coinmarketcap', fetch_url=COINMARKETCAP_URL, decoder=CoinMarketCapDecoder()),
    ]


@pytest.fixture
def bitcoinaverage_feed():
    return FeedConfig(name='bitcoinaverage', fetch_url=BITCOINAVERAGE_URL, decoder=BitcoinAverageDecoder())


def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
