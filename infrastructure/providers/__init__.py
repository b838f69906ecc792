from .base import ExchangeRateProvider
from .fixerio import FixerIOProvider
from .static import StaticRateProvider

__all__ = ['ExchangeRateProvider', 'FixerIOProvider', 'StaticRateProvider']
