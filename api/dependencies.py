import logging
from typing import Annotated

from fastapi import Depends

from application.services import CurrencyConverter
from config.settings import Settings, get_settings
from infrastructure.providers import ExchangeRateProvider, FixerIOProvider, StaticRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def build_provider(settings: Settings) -> ExchangeRateProvider:
	provider_name = settings.RATE_PROVIDER.lower()
	if provider_name == 'fixerio':
		return FixerIOProvider(
			settings.FIXERIO_API_KEY,
			timeout=settings.PROVIDER_TIMEOUT,
			base_url=settings.FIXERIO_BASE_URL,
		)
	if provider_name == 'static':
		return StaticRateProvider(settings.STATIC_RATES, base_currency=settings.STATIC_BASE_CURRENCY)
	raise ValueError(f'Unknown rate provider: {settings.RATE_PROVIDER}')


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	deps.provider = build_provider(get_settings())
	logger.info(f'Using {deps.provider.name} rate provider')


def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Rate provider not initialized')
	return deps.provider


def get_converter(
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> CurrencyConverter:
	return CurrencyConverter(provider)
