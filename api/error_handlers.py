import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.rates import AllProvidersFailed, UntrackedCurrency

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UntrackedCurrency)
	async def untracked_currency_handler(request: Request, exc: UntrackedCurrency):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(AllProvidersFailed)
	async def all_providers_failed_handler(request: Request, exc: AllProvidersFailed):
		logger.error(f'Rate refresh failed: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Exchange rate service unavailable'}
		)
