import logging

from domain.exceptions.currency import CurrencyLoadFailed, ProviderError
from domain.models.currency import FALLBACK_CURRENCIES, Currency
from infrastructure.providers.base import QuoteProvider

logger = logging.getLogger(__name__)


class CurrencyCatalogLoader:
	"""Loads the selectable currencies, falling back to a fixed list on any failure."""

	def __init__(self, provider: QuoteProvider):
		self.provider = provider

	async def load(self) -> list[Currency]:
		try:
			currencies = await self._fetch_remote()
		except CurrencyLoadFailed as e:
			logger.warning(f'Using fallback currency list: {e}')
			return list(FALLBACK_CURRENCIES)

		logger.info(f'{self.provider.name} supports {len(currencies)} currencies')
		return currencies

	async def _fetch_remote(self) -> list[Currency]:
		try:
			records = await self.provider.fetch_supported_currencies()
		except ProviderError as e:
			raise CurrencyLoadFailed(f'Failed to fetch currencies from {self.provider.name}: {e}') from e

		return [Currency.from_code(record['code'], record['name']) for record in records]
