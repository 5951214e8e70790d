import json
import logging
import sys
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.settings import Settings

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now().isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info and record.exc_info[0] is not None:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		return json.dumps(log_entry, ensure_ascii=False, default=str)


def configure_logging(
	settings: Settings,
	max_file_size: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> None:
	"""Console logging, plus rotating JSON files when LOG_DIRECTORY is set."""
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(logging.DEBUG)

	logging.getLogger('httpx').setLevel(logging.WARNING)
	logging.getLogger('httpcore').setLevel(logging.WARNING)

	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
	console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)

	if not settings.LOG_DIRECTORY:
		return

	log_directory = Path(settings.LOG_DIRECTORY)
	log_directory.mkdir(parents=True, exist_ok=True)

	file_handler = RotatingFileHandler(
		log_directory / 'rates.log',
		maxBytes=max_file_size,
		backupCount=backup_count,
		encoding='utf-8',
	)
	file_handler.setLevel(getattr(logging, settings.LOG_FILE_LEVEL.upper()))
	file_handler.setFormatter(JSONFormatter())
	root_logger.addHandler(file_handler)

	error_handler = RotatingFileHandler(
		log_directory / 'errors.log',
		maxBytes=max_file_size,
		backupCount=backup_count,
		encoding='utf-8',
	)
	error_handler.setLevel(logging.WARNING)
	error_handler.setFormatter(JSONFormatter())
	root_logger.addHandler(error_handler)
