# Smallest units (satoshis) in one PHR.
UNITS_PER_COIN = 100_000_000


def normalize_currency_code(currency_code: str) -> str:
    """Canonical form of a currency code, used for every rate cache key."""
    return currency_code.upper()
