"""Wire models for the Wise public API payloads."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import (
	ConversionQuote,
	ConversionResponse,
	ProviderLogo,
	ProviderResult,
)


class WiseCurrency(BaseModel):
	model_config = ConfigDict(extra='ignore')

	code: str
	name: str


class DeliveryDuration(BaseModel):
	min: str | None = None
	max: str | None = None


class DeliveryEstimation(BaseModel):
	duration: DeliveryDuration | None = None


class WiseQuote(BaseModel):
	model_config = ConfigDict(extra='ignore', populate_by_name=True)

	rate: Decimal
	fee: Decimal | None = None
	delivery_estimation: DeliveryEstimation | None = Field(default=None, alias='deliveryEstimation')

	def to_domain(self) -> ConversionQuote:
		duration = None
		if self.delivery_estimation and self.delivery_estimation.duration:
			duration = self.delivery_estimation.duration.min
		return ConversionQuote(rate=self.rate, fee=self.fee, delivery_estimation_duration=duration)


class LogoSet(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	svg_url: str | None = Field(default=None, alias='svgUrl')
	png_url: str | None = Field(default=None, alias='pngUrl')


class WiseLogos(BaseModel):
	normal: LogoSet | None = None


class WiseProviderEntry(BaseModel):
	model_config = ConfigDict(extra='ignore')

	name: str
	logos: WiseLogos | None = None
	quotes: list[WiseQuote] = Field(default_factory=list)

	def to_domain(self) -> ProviderResult:
		logos = None
		if self.logos and self.logos.normal:
			logos = ProviderLogo(svg_url=self.logos.normal.svg_url, png_url=self.logos.normal.png_url)
		return ProviderResult(
			name=self.name,
			quotes=tuple(quote.to_domain() for quote in self.quotes),
			logos=logos,
		)


class WiseComparison(BaseModel):
	model_config = ConfigDict(extra='ignore')

	providers: list[WiseProviderEntry] = Field(default_factory=list)

	def to_domain(self) -> ConversionResponse:
		return ConversionResponse(providers=tuple(p.to_domain() for p in self.providers))
