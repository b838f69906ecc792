"""
In-memory provider for development and offline runs.
Cross rates are derived from a table of rates quoted against one base currency.
"""

from domain.exceptions.currency import ProviderError
from infrastructure.providers.base import ExchangeRateProvider


class StaticRateProvider(ExchangeRateProvider):
	# Approximate rates relative to EUR
	DEFAULT_RATES = {
		'EUR': 1.0,
		'USD': 1.08,
		'GBP': 0.85,
		'CHF': 0.94,
		'HUF': 392.0,
	}

	def __init__(self, rates: dict[str, float] | None = None, base_currency: str = 'EUR'):
		self.base_currency = base_currency.upper()
		self.rates = {code.upper(): rate for code, rate in (rates or self.DEFAULT_RATES).items()}
		self.rates.setdefault(self.base_currency, 1.0)

	@property
	def name(self) -> str:
		return 'static'

	def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
		source_rate = self.rates.get(from_currency.upper())
		target_rate = self.rates.get(to_currency.upper())

		if source_rate is None or target_rate is None:
			raise ProviderError(f'Unsupported currency pair {from_currency}/{to_currency}')
		if not source_rate:
			raise ProviderError(f'No usable rate for {from_currency}')

		return target_rate / source_rate
