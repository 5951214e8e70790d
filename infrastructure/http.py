import httpx

DEFAULT_TIMEOUT_SECONDS = 60.0


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    proxy: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the client shared by every price feed.

    ``proxy`` takes a proxy URL (``socks5://`` needs the ``httpx[socks]`` extra).
    ``transport`` replaces the network layer entirely, e.g. a custom dialer.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={'accept': 'application/json'},
        proxy=proxy,
        transport=transport,
        follow_redirects=True,
    )
