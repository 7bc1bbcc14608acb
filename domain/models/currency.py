from dataclasses import dataclass
from decimal import Decimal

# Offset from 'A' (0x41) to REGIONAL INDICATOR SYMBOL LETTER A (0x1F1E6).
REGIONAL_INDICATOR_OFFSET = 127397


def flag_glyph(code: str) -> str:
	"""Build a flag emoji from the first two letters of a currency code.

	'USD' -> 'US' -> U+1F1FA U+1F1F8. This only approximates a country flag,
	codes like 'XAU' produce a pair that renders as two plain letters.
	"""
	return ''.join(chr(ord(char) + REGIONAL_INDICATOR_OFFSET) for char in code[:2].upper())


@dataclass(frozen=True)
class Currency:
	code: str
	name: str
	flag: str

	@classmethod
	def from_code(cls, code: str, name: str) -> 'Currency':
		return cls(code=code, name=name, flag=flag_glyph(code))


@dataclass(frozen=True)
class ConversionQuote:
	rate: Decimal
	fee: Decimal | None = None  # absent means free
	delivery_estimation_duration: str | None = None  # ISO-8601, minimum estimate


@dataclass(frozen=True)
class ProviderLogo:
	svg_url: str | None = None
	png_url: str | None = None

	@property
	def url(self) -> str | None:
		return self.svg_url or self.png_url


@dataclass(frozen=True)
class ProviderResult:
	name: str
	quotes: tuple[ConversionQuote, ...]
	logos: ProviderLogo | None = None


@dataclass(frozen=True)
class ConversionResponse:
	providers: tuple[ProviderResult, ...]

	@property
	def is_usable(self) -> bool:
		return bool(self.providers) and all(provider.quotes for provider in self.providers)

	def find_provider(self, name: str) -> ProviderResult | None:
		return next((p for p in self.providers if p.name == name), None)


FALLBACK_CURRENCIES: tuple[Currency, ...] = (
	Currency(code='USD', name='US Dollar', flag='\U0001f1fa\U0001f1f8'),
	Currency(code='EUR', name='Euro', flag='\U0001f1ea\U0001f1fa'),
	Currency(code='GBP', name='British Pound', flag='\U0001f1ec\U0001f1e7'),
	Currency(code='JPY', name='Japanese Yen', flag='\U0001f1ef\U0001f1f5'),
	Currency(code='CAD', name='Canadian Dollar', flag='\U0001f1e8\U0001f1e6'),
	Currency(code='AUD', name='Australian Dollar', flag='\U0001f1e6\U0001f1fa'),
)
