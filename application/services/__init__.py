from .converter import CurrencyConverter, format_amount, validate_amount, validate_exchange_rate

__all__ = ['CurrencyConverter', 'format_amount', 'validate_amount', 'validate_exchange_rate']
