class CurrencyException(Exception):
	pass


class InvalidAmountError(CurrencyException):
	pass


class InvalidExchangeRateError(CurrencyException):
	pass


class ProviderError(CurrencyException):
	pass


class CurrencyFetchError(CurrencyException):
	"""Single error kind raised by the converter; wraps whatever went wrong underneath."""

	def __init__(self, message: str, error: Exception | None = None):
		super().__init__(message)
		self.message = message
		self.error = error
