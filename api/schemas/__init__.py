from .responses import AllRatesResponse, CheckpointResponse, RateResponse

__all__ = [
	'AllRatesResponse',
	'CheckpointResponse',
	'RateResponse',
]
