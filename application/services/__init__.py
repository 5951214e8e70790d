import logging

from .price_fetcher import PriceFetcher
from .rate_refresher import RateRefreshWorker

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['PriceFetcher', 'RateRefreshWorker']
