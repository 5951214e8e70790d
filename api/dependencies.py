import asyncio
import contextlib
import logging

from application.services import PriceFetcher, RateRefreshWorker
from config.settings import get_settings

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	fetcher: PriceFetcher | None = None
	worker: RateRefreshWorker | None = None
	refresh_task: asyncio.Task | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.fetcher = PriceFetcher.from_settings(settings)
	deps.worker = RateRefreshWorker(deps.fetcher, interval=settings.REFRESH_INTERVAL_SECONDS)
	logger.info('Dependencies initialized')


def start_background_refresh() -> None:
	if deps.worker is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')
	deps.refresh_task = asyncio.create_task(deps.worker.run())


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.worker:
		deps.worker.stop()
	if deps.refresh_task:
		deps.refresh_task.cancel()
		with contextlib.suppress(asyncio.CancelledError):
			await deps.refresh_task
	if deps.fetcher:
		await deps.fetcher.close()

	deps.fetcher = deps.worker = deps.refresh_task = None
	logger.info('Cleanup complete')


def get_price_fetcher() -> PriceFetcher:
	if deps.fetcher is None:
		raise RuntimeError('Price fetcher not initialized')
	return deps.fetcher
