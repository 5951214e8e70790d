from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Price feeds, tried in this order
	RATE_PROVIDERS: list[str] = ['coingecko', 'coinmarketcap']

	COINGECKO_URL: str = (
		'https://api.coingecko.com/api/v3/coins/phore'
		'?tickers=false&community_data=false&developer_data=false&sparkline=false'
	)
	COINMARKETCAP_URL: str = 'https://api.coinmarketcap.com/v2/ticker/2158/?convert=BTC'
	BITCOINAVERAGE_URL: str = 'https://ticker.openbazaar.org/api'
	BITPAY_URL: str = 'https://bitpay.com/api/rates'
	BLOCKCHAININFO_URL: str = 'https://blockchain.info/ticker'
	BITCOINCHARTS_URL: str = 'https://api.bitcoincharts.com/v1/weighted_prices.json'

	HTTP_TIMEOUT_SECONDS: float = 60.0
	PROXY_URL: str | None = None
	REFRESH_INTERVAL_SECONDS: float = 15 * 60

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_FILE_LEVEL: str = 'DEBUG'
	LOG_DIRECTORY: str | None = None

	# Application
	APP_NAME: str = 'Wallet Exchange Rates'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	def provider_urls(self) -> dict[str, str]:
		return {
			'coingecko': self.COINGECKO_URL,
			'coinmarketcap': self.COINMARKETCAP_URL,
			'bitcoinaverage': self.BITCOINAVERAGE_URL,
			'bitpay': self.BITPAY_URL,
			'blockchaininfo': self.BLOCKCHAININFO_URL,
			'bitcoincharts': self.BITCOINCHARTS_URL,
		}


@lru_cache
def get_settings() -> Settings:
	return Settings()
