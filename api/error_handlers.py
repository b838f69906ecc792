import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import CurrencyFetchError, ProviderError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(CurrencyFetchError)
	async def currency_fetch_error_handler(request: Request, exc: CurrencyFetchError):
		if isinstance(exc.error, ProviderError):
			logger.error(f'Provider error: {exc}')
			return JSONResponse(
				status_code=503, content={'detail': 'Exchange rate service unavailable'}
			)
		return JSONResponse(status_code=400, content={'detail': exc.message})
