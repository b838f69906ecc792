from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Rate provider: 'fixerio' or 'static'
	RATE_PROVIDER: str = 'static'

	FIXERIO_API_KEY: str = ''
	FIXERIO_BASE_URL: str = 'http://data.fixer.io/api'
	PROVIDER_TIMEOUT: int = 10

	STATIC_BASE_CURRENCY: str = 'EUR'
	STATIC_RATES: dict[str, float] | None = None

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	# Longest report range served over HTTP, in days
	MAX_REPORT_DAYS: int = 366

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str | None = None
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
