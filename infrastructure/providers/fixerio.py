import logging

import httpx

from domain.exceptions.currency import ProviderError
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class FixerIOProvider(ExchangeRateProvider):
	BASE_URL = 'http://data.fixer.io/api'

	def __init__(
		self,
		api_key: str,
		client: httpx.Client | None = None,
		timeout: int = 10,
		base_url: str | None = None,
	):
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.Client(timeout=timeout)

	@property
	def name(self) -> str:
		return 'fixerio'

	def _request(self, endpoint: str, params: dict) -> dict:
		params['access_key'] = self.api_key
		url = f'{self.base_url}/{endpoint}'

		try:
			response = self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			logger.error(f'Fixer.io returned HTTP {e.response.status_code} for {endpoint}')
			raise ProviderError(
				f'Fixer.io HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			logger.error(f'Fixer.io request to {endpoint} failed: {e.__class__.__name__}')
			raise ProviderError(f'Fixer.io request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Fixer.io response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError(
				f'Fixer.io response parsing error: expected a JSON object, got {type(data).__name__}'
			)

		if not data.get('success', False):
			error = data.get('error')
			info = error.get('info', 'Unknown error') if isinstance(error, dict) else error or 'Unknown error'
			raise ProviderError(f'Fixer.io API error: {info}')

		return data

	def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
		data = self._request('latest', {'base': from_currency, 'symbols': to_currency})
		try:
			return float(data['rates'][to_currency])
		except (KeyError, TypeError, ValueError) as e:
			raise ProviderError(f'Missing rate for {to_currency}') from e

	def close(self) -> None:
		self._client.close()
