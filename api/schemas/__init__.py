from .responses import CurrenciesResponse, CurrencyItem, QuoteRowResponse, QuotesResponse

__all__ = [
	'CurrenciesResponse',
	'CurrencyItem',
	'QuoteRowResponse',
	'QuotesResponse',
]
