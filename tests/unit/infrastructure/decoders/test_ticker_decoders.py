# nosec B101


import pytest

from domain.exceptions.rates import SchemaMismatch
from infrastructure.decoders import (
    BitcoinAverageDecoder,
    BitcoinChartsDecoder,
    BitPayDecoder,
    BlockchainInfoDecoder,
)


# ============================================================================
# BitcoinAverage: {"USD": {"last": ...}, "timestamp": ...}
# ============================================================================

def test_bitcoinaverage_skips_timestamp():
    cache = {}
    document = {'USD': {'last': 6400.5, 'ask': 6401}, 'eur': {'last': 5500.0}, 'timestamp': 'Sat, 23 Jun'}

    BitcoinAverageDecoder().decode(document, cache)

    assert cache == {'USD': 6400.5, 'EUR': 5500.0}


def test_bitcoinaverage_missing_last():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitcoinAverageDecoder().decode({'USD': {'ask': 6401}}, {})

    assert exc_info.value.field == 'USD.last'


def test_bitcoinaverage_entry_not_an_object():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitcoinAverageDecoder().decode({'USD': 6400.5}, {})

    assert exc_info.value.field == 'USD'


# ============================================================================
# BlockchainInfo: every key is a currency
# ============================================================================

def test_blockchaininfo_reads_last_prices():
    cache = {}

    BlockchainInfoDecoder().decode({'USD': {'last': 6400.5, 'symbol': '$'}, 'JPY': {'last': 700000}}, cache)

    assert cache == {'USD': 6400.5, 'JPY': 700000.0}


def test_blockchaininfo_does_not_skip_timestamp():
    with pytest.raises(SchemaMismatch) as exc_info:
        BlockchainInfoDecoder().decode({'USD': {'last': 1.0}, 'timestamp': 1529796056}, {})

    assert exc_info.value.field == 'timestamp'


def test_blockchaininfo_rejects_array():
    with pytest.raises(SchemaMismatch):
        BlockchainInfoDecoder().decode([{'last': 1.0}], {})


# ============================================================================
# BitPay: [{"code": ..., "rate": ...}]
# ============================================================================

def test_bitpay_reads_code_rate_pairs():
    cache = {}
    document = [
        {'code': 'BTC', 'name': 'Bitcoin', 'rate': 1},
        {'code': 'usd', 'name': 'US Dollar', 'rate': 6400.5},
    ]

    BitPayDecoder().decode(document, cache)

    assert cache == {'BTC': 1.0, 'USD': 6400.5}


def test_bitpay_rejects_object_document():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitPayDecoder().decode({'code': 'USD', 'rate': 1.0}, {})

    assert exc_info.value.field == '$'


def test_bitpay_missing_code():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitPayDecoder().decode([{'code': 'USD', 'rate': 1.0}, {'rate': 2.0}], {})

    assert exc_info.value.field == '[1].code'


def test_bitpay_missing_rate():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitPayDecoder().decode([{'code': 'USD'}], {})

    assert exc_info.value.field == '[0].rate'


def test_bitpay_entry_not_an_object():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitPayDecoder().decode(['USD'], {})

    assert exc_info.value.field == '[0]'


# ============================================================================
# BitcoinCharts: {"USD": {"24h": "6400.5"}, "timestamp": ...}
# ============================================================================

def test_bitcoincharts_parses_string_prices():
    cache = {}
    document = {
        'USD': {'7d': '6500.1', '30d': '7000.0', '24h': '6400.5'},
        'EUR': {'24h': '5500'},
        'timestamp': 1529796056,
    }

    BitcoinChartsDecoder().decode(document, cache)

    assert cache == {'USD': 6400.5, 'EUR': 5500.0}


def test_bitcoincharts_skips_entries_without_24h():
    cache = {}

    BitcoinChartsDecoder().decode({'USD': {'24h': '6400.5'}, 'SLL': {'7d': '1.0'}}, cache)

    assert cache == {'USD': 6400.5}


def test_bitcoincharts_skips_zero_averages():
    cache = {}

    BitcoinChartsDecoder().decode({'USD': {'24h': '6400.5'}, 'VEF': {'24h': '0.0'}}, cache)

    assert cache == {'USD': 6400.5}


def test_bitcoincharts_numeric_24h_is_mistyped():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitcoinChartsDecoder().decode({'USD': {'24h': 6400.5}}, {})

    assert exc_info.value.field == 'USD.24h'


def test_bitcoincharts_unparseable_24h():
    with pytest.raises(SchemaMismatch) as exc_info:
        BitcoinChartsDecoder().decode({'USD': {'24h': 'n/a'}}, {})

    assert exc_info.value.field == 'USD.24h'
    assert 'n/a' in str(exc_info.value)


def test_bitcoincharts_rejects_nan():
    with pytest.raises(SchemaMismatch):
        BitcoinChartsDecoder().decode({'USD': {'24h': 'nan'}}, {})
