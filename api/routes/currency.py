from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_catalog_loader, get_quote_fetcher
from api.schemas import CurrenciesResponse, CurrencyItem, QuoteRowResponse, QuotesResponse
from application.services import ConversionQuoteFetcher, CurrencyCatalogLoader
from application.services.conversion_view import build_quote_row

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=CurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List selectable currencies',
)
async def list_currencies(
	loader: Annotated[CurrencyCatalogLoader, Depends(get_catalog_loader)],
) -> CurrenciesResponse:
	currencies = await loader.load()
	return CurrenciesResponse(
		currencies=[CurrencyItem(code=c.code, name=c.name, flag=c.flag) for c in currencies]
	)


@router.get(
	'/quotes',
	response_model=QuotesResponse,
	status_code=status.HTTP_200_OK,
	summary='Compare provider quotes for a transfer',
)
async def compare_quotes(
	source_currency: Annotated[str, Query(alias='sourceCurrency', min_length=3, max_length=3)],
	target_currency: Annotated[str, Query(alias='targetCurrency', min_length=3, max_length=3)],
	send_amount: Annotated[Decimal, Query(alias='sendAmount', gt=0)],
	fetcher: Annotated[ConversionQuoteFetcher, Depends(get_quote_fetcher)],
) -> QuotesResponse:
	source_currency = source_currency.upper()
	target_currency = target_currency.upper()
	if source_currency == target_currency:
		raise HTTPException(
			status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
			detail='sourceCurrency and targetCurrency must be different',
		)

	# plain notation upstream, never '1E+3'
	amount = f'{send_amount:f}'
	result = await fetcher.fetch(source_currency, target_currency, amount)

	rows = [build_quote_row(provider, amount, source_currency) for provider in result.providers]
	return QuotesResponse(
		source_currency=source_currency,
		target_currency=target_currency,
		send_amount=Decimal(amount),
		quotes=[
			QuoteRowResponse(
				provider=row.provider,
				logo_url=row.logo_url,
				converted_amount=row.converted_amount,
				rate=row.rate_label,
				fee=row.fee_label,
				estimated_arrival=row.arrival_label,
			)
			for row in rows
		],
	)
