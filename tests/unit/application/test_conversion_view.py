# nosec B101

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from application.services.conversion_service import ConversionQuoteFetcher
from application.services.conversion_view import (
	GENERIC_ERROR_MESSAGE,
	INVALID_AMOUNT_MESSAGE,
	ConversionView,
	ViewState,
	ViewStatus,
	build_quote_row,
)
from application.services.currency_service import CurrencyCatalogLoader
from domain.exceptions.currency import NoQuotesAvailable, RequestFailed, SubmissionInProgress
from domain.models.currency import (
	ConversionQuote,
	ConversionResponse,
	Currency,
	ProviderLogo,
	ProviderResult,
)


def currencies(*codes: str) -> list[Currency]:
	return [Currency.from_code(code, code) for code in codes]


WISE = ProviderResult(
	name='Wise',
	quotes=(
		ConversionQuote(
			rate=Decimal('0.92153'),
			fee=Decimal('6.11'),
			delivery_estimation_duration='PT20H8M16.305111S',
		),
	),
	logos=ProviderLogo(svg_url='https://wise.com/logo.svg', png_url='https://wise.com/logo.png'),
)
BANK = ProviderResult(name='Bank', quotes=(ConversionQuote(rate=Decimal('0.9')),))


@pytest.fixture
def mock_loader():
	loader = AsyncMock(spec=CurrencyCatalogLoader)
	loader.load.return_value = currencies('USD', 'EUR', 'GBP')
	return loader


@pytest.fixture
def mock_fetcher():
	fetcher = AsyncMock(spec=ConversionQuoteFetcher)
	fetcher.fetch.return_value = ConversionResponse(providers=(WISE, BANK))
	return fetcher


@pytest.fixture
def view(mock_loader, mock_fetcher):
	return ConversionView(catalog_loader=mock_loader, quote_fetcher=mock_fetcher)


class TestMount:
	@pytest.mark.asyncio
	async def test_keeps_default_pair_when_available(self, view):
		state = await view.mount()

		assert [c.code for c in state.currencies] == ['USD', 'EUR', 'GBP']
		assert state.from_currency == 'USD'
		assert state.to_currency == 'EUR'
		assert state.status is ViewStatus.IDLE

	@pytest.mark.asyncio
	async def test_picks_first_currencies_when_defaults_missing(self, view, mock_loader):
		mock_loader.load.return_value = currencies('AED', 'BRL', 'CHF')

		state = await view.mount()

		assert state.from_currency == 'AED'
		assert state.to_currency == 'BRL'

	@pytest.mark.asyncio
	async def test_only_target_missing(self, view, mock_loader):
		mock_loader.load.return_value = currencies('GBP', 'USD')

		state = await view.mount()

		assert state.from_currency == 'USD'
		assert state.to_currency == 'GBP'

	@pytest.mark.asyncio
	async def test_single_currency_leaves_defaults(self, view, mock_loader):
		mock_loader.load.return_value = currencies('CHF')

		state = await view.mount()

		assert state.from_currency == 'USD'
		assert state.to_currency == 'EUR'


class TestCurrencySelection:
	@pytest.mark.asyncio
	async def test_selecting_target_as_source_moves_target(self, view):
		await view.mount()

		state = view.select_from_currency('EUR')

		assert state.from_currency == 'EUR'
		assert state.to_currency == 'USD'

	@pytest.mark.asyncio
	async def test_selecting_source_as_target_moves_source(self, view):
		await view.mount()

		state = view.select_to_currency('USD')

		assert state.to_currency == 'USD'
		assert state.from_currency == 'EUR'

	@pytest.mark.asyncio
	async def test_distinct_selection_leaves_other_side(self, view):
		await view.mount()

		state = view.select_to_currency('GBP')

		assert state.from_currency == 'USD'
		assert state.to_currency == 'GBP'

	@pytest.mark.asyncio
	async def test_swap_exchanges_source_and_target(self, view):
		await view.mount()

		state = view.swap_currencies()

		assert state.from_currency == 'EUR'
		assert state.to_currency == 'USD'

		state = view.swap_currencies()

		assert (state.from_currency, state.to_currency) == ('USD', 'EUR')

	def test_transitions_return_new_records(self, view):
		before = view.state

		after = view.set_amount('250')

		assert before.amount == '1000'
		assert after.amount == '250'
		assert after is not before


class TestSubmit:
	@pytest.mark.asyncio
	async def test_success(self, view, mock_fetcher):
		await view.mount()
		view.set_amount('500')

		state = await view.submit()

		assert state.status is ViewStatus.SUCCESS
		assert state.error is None
		assert state.submitted_amount == '500'
		assert state.result.providers == (WISE, BANK)
		mock_fetcher.fetch.assert_awaited_once_with('USD', 'EUR', '500')

	@pytest.mark.asyncio
	@pytest.mark.parametrize('amount', ['', '   ', 'abc', '0', '-5', 'NaN', 'Infinity'])
	async def test_invalid_amount_fails_without_fetching(self, view, mock_fetcher, amount):
		view.set_amount(amount)

		state = await view.submit()

		assert state.status is ViewStatus.FAILURE
		assert state.error == INVALID_AMOUNT_MESSAGE
		assert state.result is None
		mock_fetcher.fetch.assert_not_called()

	@pytest.mark.asyncio
	async def test_invalid_amount_clears_previous_result(self, view):
		await view.submit()
		view.set_amount('-5')

		state = await view.submit()

		assert state.result is None
		assert view.quote_rows() == []

	@pytest.mark.asyncio
	async def test_request_records_submitted_pair(self, view):
		await view.mount()

		state = await view.submit()

		assert (state.submitted_from, state.submitted_to) == ('USD', 'EUR')

	@pytest.mark.asyncio
	async def test_request_failure_shows_status(self, view, mock_fetcher):
		mock_fetcher.fetch.side_effect = RequestFailed(500)

		state = await view.submit()

		assert state.status is ViewStatus.FAILURE
		assert state.error == 'HTTP error! status: 500'
		assert state.result is None

	@pytest.mark.asyncio
	async def test_no_quotes_message(self, view, mock_fetcher):
		mock_fetcher.fetch.side_effect = NoQuotesAvailable()

		state = await view.submit()

		assert state.error == 'No conversion data available'

	@pytest.mark.asyncio
	async def test_unexpected_error_uses_generic_message(self, view, mock_fetcher):
		mock_fetcher.fetch.side_effect = RuntimeError('kaboom')

		state = await view.submit()

		assert state.status is ViewStatus.FAILURE
		assert state.error == GENERIC_ERROR_MESSAGE

	@pytest.mark.asyncio
	async def test_resubmit_clears_previous_error(self, view, mock_fetcher):
		mock_fetcher.fetch.side_effect = [RequestFailed(503), ConversionResponse(providers=(BANK,))]

		await view.submit()
		state = await view.submit()

		assert state.status is ViewStatus.SUCCESS
		assert state.error is None

	@pytest.mark.asyncio
	async def test_submit_while_loading_is_rejected(self, view, mock_fetcher):
		release = asyncio.Event()

		async def slow_fetch(*args):
			await release.wait()
			return ConversionResponse(providers=(WISE,))

		mock_fetcher.fetch.side_effect = slow_fetch

		first = asyncio.create_task(view.submit())
		await asyncio.sleep(0)
		assert view.state.status is ViewStatus.LOADING

		with pytest.raises(SubmissionInProgress):
			await view.submit()

		release.set()
		state = await first
		assert state.status is ViewStatus.SUCCESS
		mock_fetcher.fetch.assert_awaited_once()


class TestQuoteRows:
	def test_rows_before_submit_are_empty(self, view):
		assert view.quote_rows() == []
		assert view.provider('Wise') is None

	@pytest.mark.asyncio
	async def test_rows_use_submitted_amount(self, view):
		view.set_amount('1000')
		await view.submit()
		view.set_amount('1')

		rows = view.quote_rows()

		assert [r.provider for r in rows] == ['Wise', 'Bank']
		wise, bank = rows
		assert wise.converted_amount == Decimal('921.53')
		assert wise.rate_label == '0.9215'
		assert wise.fee_label == '6.11 USD'
		assert wise.arrival_label == '20h 8m'
		assert wise.logo_url == 'https://wise.com/logo.svg'

		assert bank.converted_amount == Decimal('900.00')
		assert bank.rate_label == '0.9000'
		assert bank.fee_label == 'Free'
		assert bank.arrival_label == 'N/A'
		assert bank.logo_url is None

	@pytest.mark.asyncio
	async def test_rows_keep_submitted_currency_after_reselect(self, view):
		await view.mount()
		await view.submit()
		view.select_from_currency('GBP')

		rows = view.quote_rows()

		assert rows[0].fee_label == '6.11 USD'

	@pytest.mark.asyncio
	async def test_provider_lookup(self, view):
		await view.submit()

		assert view.provider('Wise') is WISE
		assert view.provider('Nobody') is None


def test_build_quote_row_with_unparseable_amount():
	row = build_quote_row(BANK, 'abc', 'USD')

	assert row.converted_amount is None
	assert row.rate_label == '0.9000'


def test_zero_fee_is_free():
	provider = ProviderResult(name='P', quotes=(ConversionQuote(rate=Decimal('1'), fee=Decimal('0')),))

	assert build_quote_row(provider, '10', 'GBP').fee_label == 'Free'


def test_initial_state_can_be_injected(mock_loader, mock_fetcher):
	view = ConversionView(
		catalog_loader=mock_loader,
		quote_fetcher=mock_fetcher,
		initial_state=ViewState(from_currency='GBP', to_currency='JPY', amount='5'),
	)

	assert view.state.from_currency == 'GBP'
	assert view.state.amount == '5'