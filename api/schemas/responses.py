from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RateResponse(BaseModel):
	currency_code: str = Field(..., description='Normalized currency code')
	rate: float = Field(..., description='Price of one coin in this currency')

	model_config = ConfigDict(
		json_schema_extra={'example': {'currency_code': 'USD', 'rate': 0.0421}}
	)


class AllRatesResponse(BaseModel):
	rates: dict[str, float] = Field(..., description='Price of one coin per currency code')
	units_per_coin: int = Field(..., description='Smallest units in one coin')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'rates': {'USD': 0.0421, 'BTC': 0.0000061}, 'units_per_coin': 100000000}
		}
	)


class CheckpointResponse(BaseModel):
	height: int = Field(..., description='Block height of the checkpoint')
	block_hash: str = Field(..., description='Hash of the checkpoint block')
	timestamp: datetime = Field(..., description='Block header timestamp')
