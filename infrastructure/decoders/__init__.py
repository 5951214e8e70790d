from .base import ExchangeRateDecoder
from .bitcoinaverage import BitcoinAverageDecoder
from .bitcoincharts import BitcoinChartsDecoder
from .bitpay import BitPayDecoder
from .blockchaininfo import BlockchainInfoDecoder
from .coingecko import CoinGeckoDecoder
from .coinmarketcap import CoinMarketCapDecoder

__all__ = [
    'ExchangeRateDecoder',
    'BitcoinAverageDecoder',
    'BitcoinChartsDecoder',
    'BitPayDecoder',
    'BlockchainInfoDecoder',
    'CoinGeckoDecoder',
    'CoinMarketCapDecoder',
]
