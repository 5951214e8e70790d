import httpx

COINGECKO_URL = 'https://coingecko.test/api/v3/coins/phore'
COINMARKETCAP_URL = 'https://coinmarketcap.test/v2/ticker/2158/'
BITCOINAVERAGE_URL = 'https://bitcoinaverage.test/api'

COINGECKO_DOCUMENT = {
    'id': 'phore',
    'market_data': {'current_price': {'usd': 0.42, 'eur': 0.37, 'btc': 0.0000061}},
}

COINMARKETCAP_DOCUMENT = {
    'metadata': {'timestamp': 1529796056, 'error': None},
    'data': {'id': 2158, 'quotes': {'USD': {'price': 0.41}, 'BTC': {'price': 0.000006}}},
}


def json_transport(routes: dict[str, httpx.Response]) -> httpx.MockTransport:
    """Transport answering each URL with a canned response, 404 otherwise."""
    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(str(request.url), httpx.Response(404, text='Not Found'))

    return httpx.MockTransport(handler)
