from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'EUR',
				'to_currency': 'HUF',
				'amount': 1.0,
				'converted_amount': 392.0,
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
	provider: str = Field(..., description='Name of the configured rate provider')

	model_config = ConfigDict(json_schema_extra={'example': {'status': 'healthy', 'provider': 'static'}})
