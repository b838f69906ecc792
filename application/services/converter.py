import logging
import math
from datetime import date, datetime, timedelta

from domain.exceptions.currency import CurrencyFetchError, InvalidAmountError, InvalidExchangeRateError
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

REPORT_HEADER = 'Conversion Report:'


def _is_nan(value) -> bool:
	try:
		return math.isnan(value)
	except TypeError:
		return True


def validate_amount(amount) -> None:
	if _is_nan(amount):
		raise InvalidAmountError('Invalid amount input.')


def validate_exchange_rate(exchange_rate) -> None:
	if not exchange_rate:
		raise InvalidExchangeRateError('Unable to fetch exchange rate.')

	try:
		finite = math.isfinite(exchange_rate)
	except TypeError:
		finite = False
	if not finite:
		raise InvalidExchangeRateError('Invalid exchange rate.')


def format_amount(value) -> str:
	"""Render a converted amount, dropping the trailing '.0' of integral floats."""
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)


class CurrencyConverter:
	FIXED_AMOUNT = 100

	def __init__(self, exchange_rate_provider: ExchangeRateProvider):
		self.exchange_rate_provider = exchange_rate_provider

	def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
		try:
			validate_amount(amount)
			exchange_rate = self._get_exchange_rate(from_currency, to_currency)
			validate_exchange_rate(exchange_rate)
			return amount * exchange_rate
		except Exception as e:
			logger.warning(f'Conversion {from_currency}->{to_currency} failed: {e}')
			raise CurrencyFetchError(str(e), e) from e

	def generate_conversion_report(
		self, from_currency: str, to_currency: str, start_date: date, end_date: date
	) -> str:
		conversions: list[float] = []
		current_date = _as_date(start_date)
		last_date = _as_date(end_date)

		while current_date <= last_date:
			try:
				exchange_rate = self._get_exchange_rate(from_currency, to_currency)
				validate_exchange_rate(exchange_rate)
				conversions.append(self.FIXED_AMOUNT * exchange_rate)
			except Exception as e:
				logger.warning(
					f'Report {from_currency}->{to_currency} aborted on {current_date.isoformat()}: {e}'
				)
				raise CurrencyFetchError(str(e), e) from e

			# last_date may be date.max, so never step past it
			if current_date == last_date:
				break
			current_date += timedelta(days=1)

		logger.info(
			f'Generated {from_currency}->{to_currency} report with {len(conversions)} entries '
			f'({start_date} to {end_date})'
		)
		body = '\n'.join(format_amount(value) for value in conversions)
		return f'{REPORT_HEADER}\n{body}'

	def _get_exchange_rate(self, from_currency: str, to_currency: str):
		logger.debug(f'Fetching {from_currency}->{to_currency} rate from {self.exchange_rate_provider.name}')
		return self.exchange_rate_provider.get_exchange_rate(from_currency, to_currency)


def _as_date(value: date) -> date:
	if isinstance(value, datetime):
		return value.date()
	return value
