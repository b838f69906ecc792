from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import PlainTextResponse

from api.dependencies import get_converter, get_provider
from api.schemas import ConversionResponse, HealthResponse
from application.services import CurrencyConverter
from config.settings import Settings, get_settings
from infrastructure.providers import ExchangeRateProvider

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[float, Path()],
	converter: Annotated[CurrencyConverter, Depends(get_converter)],
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	converted_amount = converter.convert(amount, from_currency, to_currency)
	return ConversionResponse(
		from_currency=from_currency,
		to_currency=to_currency,
		amount=amount,
		converted_amount=converted_amount,
	)


@router.get(
	'/report/{from_currency}/{to_currency}',
	response_class=PlainTextResponse,
	status_code=status.HTTP_200_OK,
	summary='Daily conversion report of a fixed amount',
)
def conversion_report(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	start_date: Annotated[date, Query()],
	end_date: Annotated[date, Query()],
	converter: Annotated[CurrencyConverter, Depends(get_converter)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> str:
	span_days = (end_date - start_date).days + 1
	if span_days > settings.MAX_REPORT_DAYS:
		raise HTTPException(
			status_code=422,
			detail=f'Report range spans {span_days} days, the maximum is {settings.MAX_REPORT_DAYS}',
		)

	return converter.generate_conversion_report(
		from_currency.upper(), to_currency.upper(), start_date, end_date
	)


health_router = APIRouter(tags=['health'])


@health_router.get('/health', response_model=HealthResponse, summary='Service health')
def health(provider: Annotated[ExchangeRateProvider, Depends(get_provider)]) -> HealthResponse:
	return HealthResponse(status='healthy', provider=provider.name)
