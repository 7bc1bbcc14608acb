import logging
from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from application.services.conversion_service import ConversionQuoteFetcher
from application.services.currency_service import CurrencyCatalogLoader
from domain.exceptions.currency import ConversionFailed, SubmissionInProgress
from domain.formatting import format_duration
from domain.models.currency import ConversionResponse, Currency, ProviderResult

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Failed to fetch conversion rates. Please try again.'
INVALID_AMOUNT_MESSAGE = 'Please enter an amount greater than zero.'

CENTS = Decimal('0.01')
RATE_PLACES = Decimal('0.0001')


class ViewStatus(str, Enum):
	IDLE = 'idle'
	LOADING = 'loading'
	SUCCESS = 'success'
	FAILURE = 'failure'


@dataclass(frozen=True)
class ViewState:
	status: ViewStatus = ViewStatus.IDLE
	currencies: tuple[Currency, ...] = field(default_factory=tuple)
	from_currency: str = 'USD'
	to_currency: str = 'EUR'
	amount: str = '1000'
	result: ConversionResponse | None = None
	error: str | None = None
	# request the current result was fetched for
	submitted_amount: str | None = None
	submitted_from: str | None = None
	submitted_to: str | None = None


@dataclass(frozen=True)
class QuoteRow:
	provider: str
	logo_url: str | None
	converted_amount: Decimal | None
	rate_label: str
	fee_label: str
	arrival_label: str


def _first_other_code(currencies: tuple[Currency, ...], code: str) -> str | None:
	return next((c.code for c in currencies if c.code != code), None)


def _is_positive_amount(amount: str) -> bool:
	try:
		value = Decimal(amount)
	except InvalidOperation:
		return False
	return value.is_finite() and value > 0


def build_quote_row(provider: ProviderResult, amount: str, from_currency: str) -> QuoteRow:
	quote = provider.quotes[0]
	try:
		converted = (Decimal(amount) * quote.rate).quantize(CENTS, rounding=ROUND_HALF_UP)
	except InvalidOperation:
		converted = None

	arrival = 'N/A'
	if quote.delivery_estimation_duration:
		arrival = format_duration(quote.delivery_estimation_duration)

	return QuoteRow(
		provider=provider.name,
		logo_url=provider.logos.url if provider.logos else None,
		converted_amount=converted,
		rate_label=str(quote.rate.quantize(RATE_PLACES, rounding=ROUND_HALF_UP)),
		fee_label=f'{quote.fee} {from_currency}' if quote.fee else 'Free',
		arrival_label=arrival,
	)


class ConversionView:
	"""
	Form state for one converter widget.

	The state is an immutable ViewState record; every operation swaps it for a
	new one. Status moves idle -> loading -> success | failure on submit.
	"""

	def __init__(
		self,
		catalog_loader: CurrencyCatalogLoader,
		quote_fetcher: ConversionQuoteFetcher,
		initial_state: ViewState | None = None,
	):
		self.catalog_loader = catalog_loader
		self.quote_fetcher = quote_fetcher
		self.state = initial_state or ViewState()

	async def mount(self) -> ViewState:
		currencies = tuple(await self.catalog_loader.load())
		state = replace(self.state, currencies=currencies)

		if len(currencies) >= 2:
			codes = {c.code for c in currencies}
			if state.from_currency not in codes:
				state = replace(state, from_currency=currencies[0].code)
			if state.to_currency not in codes or state.to_currency == state.from_currency:
				other = _first_other_code(currencies, state.from_currency)
				if other:
					state = replace(state, to_currency=other)

		self.state = state
		return state

	def select_from_currency(self, code: str) -> ViewState:
		state = replace(self.state, from_currency=code)
		if code == state.to_currency:
			other = _first_other_code(state.currencies, code)
			if other:
				state = replace(state, to_currency=other)
		self.state = state
		return state

	def select_to_currency(self, code: str) -> ViewState:
		state = replace(self.state, to_currency=code)
		if code == state.from_currency:
			other = _first_other_code(state.currencies, code)
			if other:
				state = replace(state, from_currency=other)
		self.state = state
		return state

	def swap_currencies(self) -> ViewState:
		state = self.state
		self.state = replace(state, from_currency=state.to_currency, to_currency=state.from_currency)
		return self.state

	def set_amount(self, amount: str) -> ViewState:
		self.state = replace(self.state, amount=amount)
		return self.state

	async def submit(self) -> ViewState:
		if self.state.status is ViewStatus.LOADING:
			raise SubmissionInProgress('A conversion request is already in flight')

		if not _is_positive_amount(self.state.amount):
			self.state = replace(
				self.state, status=ViewStatus.FAILURE, error=INVALID_AMOUNT_MESSAGE, result=None
			)
			return self.state

		self.state = replace(
			self.state,
			status=ViewStatus.LOADING,
			error=None,
			result=None,
			submitted_amount=self.state.amount,
			submitted_from=self.state.from_currency,
			submitted_to=self.state.to_currency,
		)
		state = self.state

		try:
			result = await self.quote_fetcher.fetch(
				state.from_currency, state.to_currency, state.amount
			)
		except ConversionFailed as e:
			logger.error(f'Conversion {state.from_currency} -> {state.to_currency} failed: {e}')
			self.state = replace(state, status=ViewStatus.FAILURE, error=str(e) or GENERIC_ERROR_MESSAGE)
			return self.state
		except Exception as e:
			logger.error(f'Unexpected conversion error: {e}', exc_info=True)
			self.state = replace(state, status=ViewStatus.FAILURE, error=GENERIC_ERROR_MESSAGE)
			return self.state

		self.state = replace(state, status=ViewStatus.SUCCESS, result=result)
		return self.state

	def quote_rows(self) -> list[QuoteRow]:
		state = self.state
		if state.result is None:
			return []
		amount = state.submitted_amount or state.amount
		return [
			build_quote_row(provider, amount, state.submitted_from or state.from_currency)
			for provider in state.result.providers
		]

	def provider(self, name: str) -> ProviderResult | None:
		if self.state.result is None:
			return None
		return self.state.result.find_provider(name)
