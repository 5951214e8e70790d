from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_price_fetcher
from api.schemas import AllRatesResponse, CheckpointResponse, RateResponse
from application.services import PriceFetcher
from domain.models.currency import normalize_currency_code
from infrastructure.checkpoints import select_checkpoint

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates',
	response_model=AllRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='All cached exchange rates',
)
async def get_all_rates(
	fetcher: Annotated[PriceFetcher, Depends(get_price_fetcher)],
	use_cache: Annotated[bool, Query(description='Skip the refresh and serve cached rates')] = True,
) -> AllRatesResponse:
	rates = await fetcher.get_all_rates(use_cache=use_cache)
	return AllRatesResponse(rates=rates, units_per_coin=fetcher.units_per_coin())


@router.get(
	'/rates/{currency_code}',
	response_model=RateResponse,
	status_code=status.HTTP_200_OK,
	summary='Exchange rate for one currency',
)
async def get_exchange_rate(
	currency_code: Annotated[str, Path(min_length=2, max_length=10)],
	fetcher: Annotated[PriceFetcher, Depends(get_price_fetcher)],
	latest: Annotated[bool, Query(description='Refresh from the providers first')] = False,
) -> RateResponse:
	currency_code = normalize_currency_code(currency_code)

	if latest:
		rate = await fetcher.get_latest_rate(currency_code)
	else:
		rate = await fetcher.get_exchange_rate(currency_code)
	return RateResponse(currency_code=currency_code, rate=rate)


@router.get(
	'/checkpoint',
	response_model=CheckpointResponse,
	status_code=status.HTTP_200_OK,
	summary='Sync checkpoint for a wallet creation date',
)
async def get_checkpoint(created: Annotated[datetime, Query()]) -> CheckpointResponse:
	checkpoint = select_checkpoint(created)
	return CheckpointResponse(
		height=checkpoint.height,
		block_hash=checkpoint.block_hash,
		timestamp=checkpoint.header.timestamp,
	)
