import logging

from domain.exceptions.currency import (
	ConversionFailed,
	NoQuotesAvailable,
	ProviderError,
	RequestFailed,
)
from domain.models.currency import ConversionResponse
from infrastructure.providers.base import QuoteProvider

logger = logging.getLogger(__name__)


class ConversionQuoteFetcher:
	def __init__(self, provider: QuoteProvider):
		self.provider = provider

	async def fetch(self, source: str, target: str, amount: str) -> ConversionResponse:
		"""Fetch provider quotes for sending ``amount`` of ``source`` into ``target``.

		Raises RequestFailed on a non-2xx answer, NoQuotesAvailable when no
		provider (or a provider without quotes) comes back, and ConversionFailed
		for transport or payload errors. Quote values are returned as received.
		"""
		try:
			response = await self.provider.fetch_comparison(source, target, amount)
		except ProviderError as e:
			if e.status_code is not None:
				raise RequestFailed(e.status_code) from e
			raise ConversionFailed(str(e)) from e

		if not response.is_usable:
			raise NoQuotesAvailable()

		logger.info(f'{len(response.providers)} providers quoted {amount} {source} -> {target}')
		return response
