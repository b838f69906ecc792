from abc import ABC, abstractmethod


class ExchangeRateProvider(ABC):
	"""Source of exchange rates for a currency pair."""

	@property
	@abstractmethod
	def name(self) -> str:
		...

	@abstractmethod
	def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
		"""Return the rate converting one unit of from_currency into to_currency.

		Implementations raise ProviderError when the rate cannot be fetched.
		"""
		...

	def close(self) -> None:
		"""Release any resources held by the provider."""
