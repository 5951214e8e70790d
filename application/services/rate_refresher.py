import asyncio
import logging
import signal
from typing import Protocol

DEFAULT_REFRESH_INTERVAL = 15 * 60
LOGGER_NAME = 'application.services.rate_refresher'


class Refreshable(Protocol):
    async def refresh(self) -> None:
        ...


class RateRefreshWorker:
    """
    Background worker that keeps the exchange rate cache fresh.

    Refreshes immediately, then once per interval for as long as the process
    lives. A failed refresh is logged and the schedule carries on.
    """

    def __init__(
        self,
        fetcher: Refreshable,
        interval: float = DEFAULT_REFRESH_INTERVAL,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            fetcher: Object whose ``refresh()`` repopulates the rate cache
            interval: Seconds between refreshes (default: 15 minutes)
            logger: Diagnostic sink, defaults to this module's logger
        """
        self.fetcher = fetcher
        self.interval = interval
        self.is_running = False
        self.cycle_count = 0
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._stop_event = asyncio.Event()

    async def refresh_cycle(self) -> bool:
        """Run one refresh. Never raises; returns whether it succeeded."""
        self.cycle_count += 1
        try:
            await self.fetcher.refresh()
        except Exception as e:
            self.logger.error(f'Refresh cycle #{self.cycle_count} failed: {e}')
            return False

        self.logger.debug(f'Refresh cycle #{self.cycle_count} completed')
        return True

    async def run(self) -> None:
        """Main worker loop. Runs until ``stop()`` is called or the task is cancelled."""
        if self._stop_event.is_set():
            self.logger.info('Rate refresh worker stopped before it started')
            return

        self.is_running = True
        self.logger.info(f'Rate refresh worker started, interval {self.interval}s')

        while not self._stop_event.is_set():
            try:
                await self.refresh_cycle()
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                continue
            except asyncio.CancelledError:
                self.logger.info('Rate refresh worker received cancellation signal')
                break

        self.is_running = False
        self.logger.info('Rate refresh worker stopped')

    def stop(self) -> None:
        """Stop the loop at its next wake-up, or before it starts."""
        self.logger.info('Stopping rate refresh worker...')
        self.is_running = False
        self._stop_event.set()


async def main() -> None:
    """Entry point for running the refresher on its own."""
    from application.services.price_fetcher import PriceFetcher
    from config.logging_conf import configure_logging
    from config.settings import get_settings

    settings = get_settings()
    configure_logging(settings)
    # Under ``python -m`` this module is ``__main__``
    logger = logging.getLogger(LOGGER_NAME)

    fetcher = PriceFetcher.from_settings(settings)
    worker = RateRefreshWorker(fetcher, interval=settings.REFRESH_INTERVAL_SECONDS, logger=logger)
    logger.info(f'Providers in priority order: {[p.name for p in fetcher.providers]}')

    def signal_handler(sig):
        logger.info(f'Received signal {sig.value}, shutting down gracefully...')
        worker.stop()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, signal_handler, sig)

    try:
        await worker.run()
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)
        await fetcher.close()
        logger.info('Cleanup completed')


if __name__ == '__main__':
    asyncio.run(main())
