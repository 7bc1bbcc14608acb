from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CurrencyItem(BaseModel):
	code: str = Field(..., description='ISO 4217 currency code')
	name: str = Field(..., description='Display name')
	flag: str = Field(..., description='Regional indicator flag glyph')


class CurrenciesResponse(BaseModel):
	currencies: list[CurrencyItem] = Field(description='Selectable currencies, in upstream order')

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [{'currencies': [{'code': 'USD', 'name': 'US Dollar', 'flag': '🇺🇸'}]}]
		}
	)


class QuoteRowResponse(BaseModel):
	provider: str = Field(..., description='Provider name')
	logo_url: str | None = Field(None, description='Provider logo, svg preferred')
	converted_amount: Decimal | None = Field(None, description='Amount the recipient gets')
	rate: str = Field(..., description='Exchange rate, 4 decimal places')
	fee: str = Field(..., description="Fee in source currency or 'Free'")
	estimated_arrival: str = Field(..., description="Short delivery estimate or 'N/A'")


class QuotesResponse(BaseModel):
	source_currency: str = Field(..., description='Source currency code')
	target_currency: str = Field(..., description='Target currency code')
	send_amount: Decimal = Field(..., description='Amount sent')
	quotes: list[QuoteRowResponse]

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'source_currency': 'USD',
				'target_currency': 'EUR',
				'send_amount': '1000',
				'quotes': [
					{
						'provider': 'Wise',
						'logo_url': None,
						'converted_amount': '921.50',
						'rate': '0.9215',
						'fee': '6.11 USD',
						'estimated_arrival': '20h 8m',
					}
				],
			}
		}
	)
