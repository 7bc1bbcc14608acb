import logging

from application.services import ConversionQuoteFetcher, CurrencyCatalogLoader
from config.settings import get_settings
from infrastructure.providers import QuoteProvider, WiseProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: QuoteProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = WiseProvider(base_url=settings.WISE_API_URL, timeout=settings.HTTP_TIMEOUT)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_provider() -> QuoteProvider:
	if deps.provider is None:
		raise RuntimeError('Provider not initialized')
	return deps.provider


def get_catalog_loader() -> CurrencyCatalogLoader:
	return CurrencyCatalogLoader(provider=get_provider())


def get_quote_fetcher() -> ConversionQuoteFetcher:
	return ConversionQuoteFetcher(provider=get_provider())
