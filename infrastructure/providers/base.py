from typing import Protocol

from domain.models.currency import ConversionResponse


class QuoteProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_supported_currencies(self) -> list[dict]: ...

	async def fetch_comparison(
		self, source_currency: str, target_currency: str, send_amount: str
	) -> ConversionResponse: ...

	async def close(self) -> None: ...
