class ExchangeRateError(Exception):
    pass


class NetworkError(ExchangeRateError):
    pass


class ParseError(ExchangeRateError):
    pass


class SchemaMismatch(ExchangeRateError):
    """Response is valid JSON but a required field is missing or mistyped."""

    def __init__(self, source: str, field: str, detail: str = 'missing or mistyped'):
        self.source = source
        self.field = field
        super().__init__(f'{source}: field {field!r} {detail}')


class ProviderError(ExchangeRateError):
    pass


class UntrackedCurrency(ExchangeRateError):
    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(f'Currency {currency_code} is not tracked')


class AllProvidersFailed(ExchangeRateError):
    def __init__(self, errors: dict[str, Exception]):
        self.errors = errors
        super().__init__(f'All {len(errors)} exchange rate providers failed')
