import logging

from .base import ExchangeRateProvider
from .registry import DECODERS, FeedConfig, resolve_feeds

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['ExchangeRateProvider', 'DECODERS', 'FeedConfig', 'resolve_feeds']
