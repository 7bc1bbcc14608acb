class CurrencyException(Exception):
	pass


class ProviderError(CurrencyException):
	def __init__(self, message: str, status_code: int | None = None):
		super().__init__(message)
		self.status_code = status_code


class CurrencyLoadFailed(CurrencyException):
	pass


class ConversionFailed(CurrencyException):
	pass


class RequestFailed(ConversionFailed):
	def __init__(self, status_code: int):
		super().__init__(f'HTTP error! status: {status_code}')
		self.status_code = status_code


class NoQuotesAvailable(ConversionFailed):
	def __init__(self, message: str = 'No conversion data available'):
		super().__init__(message)


class SubmissionInProgress(CurrencyException):
	pass
