from .conversion_service import ConversionQuoteFetcher
from .conversion_view import ConversionView, QuoteRow, ViewState, ViewStatus
from .currency_service import CurrencyCatalogLoader

__all__ = [
	'ConversionQuoteFetcher',
	'ConversionView',
	'CurrencyCatalogLoader',
	'QuoteRow',
	'ViewState',
	'ViewStatus',
]
