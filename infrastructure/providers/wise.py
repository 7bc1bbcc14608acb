import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from domain.exceptions.currency import ProviderError
from domain.models.currency import ConversionResponse
from infrastructure.providers.schemas import WiseComparison, WiseCurrency

logger = logging.getLogger(__name__)

_currency_list = TypeAdapter(list[WiseCurrency])


class WiseProvider:
	BASE_URL = 'https://api.wise.com'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = 5.0,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(
			timeout=timeout, headers={'accept': 'application/json'}
		)

	@property
	def name(self) -> str:
		return 'wise'

	async def _request(self, endpoint: str, params: dict | None = None) -> Any:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params)
			response.raise_for_status()
			data = response.json()
			logger.debug(f'GET {endpoint} -> {response.status_code}')
			return data

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Wise HTTP error {e.response.status_code}: {e.response.text[:200]}',
				status_code=e.response.status_code,
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Wise request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise ProviderError(f'Wise response parsing error: {str(e)}') from e

	async def fetch_supported_currencies(self) -> list[dict]:
		data = await self._request('v1/currencies')
		try:
			records = _currency_list.validate_python(data)
		except ValidationError as e:
			raise ProviderError(f'Unexpected currency list payload: {e.error_count()} errors') from e
		return [{'code': record.code, 'name': record.name} for record in records]

	async def fetch_comparison(
		self, source_currency: str, target_currency: str, send_amount: str
	) -> ConversionResponse:
		params = {
			'sourceCurrency': source_currency,
			'targetCurrency': target_currency,
			'sendAmount': send_amount,
		}
		data = await self._request('v4/comparisons/', params)
		if data is None:
			return ConversionResponse(providers=())

		try:
			comparison = WiseComparison.model_validate(data)
		except ValidationError as e:
			raise ProviderError(f'Unexpected comparison payload: {e.error_count()} errors') from e
		return comparison.to_domain()

	async def close(self) -> None:
		await self._client.aclose()
