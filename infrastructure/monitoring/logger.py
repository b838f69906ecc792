import json
import logging
import sys
import traceback
from datetime import date, datetime
from decimal import Decimal
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.settings import Settings

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, (datetime, date)):
			return o.isoformat()
		if isinstance(o, Decimal):
			return str(o)
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.fromtimestamp(record.created).isoformat(),
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

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def _file_handler(path: Path, level: int, max_file_size: int, backup_count: int) -> RotatingFileHandler:
	path.parent.mkdir(parents=True, exist_ok=True)
	handler = RotatingFileHandler(path, maxBytes=max_file_size, backupCount=backup_count, encoding='utf-8')
	handler.setLevel(level)
	handler.setFormatter(JSONFormatter())
	return handler


def setup_logging(
	settings: Settings,
	max_file_size: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> None:
	"""Configure the root logger: console output plus rotating JSON files when a log directory is set."""
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(logging.DEBUG)

	logging.getLogger('httpx').setLevel(logging.WARNING)

	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
	if settings.LOG_JSON:
		console_handler.setFormatter(JSONFormatter())
	else:
		console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)

	if settings.LOG_DIRECTORY:
		log_directory = Path(settings.LOG_DIRECTORY)
		root_logger.addHandler(
			_file_handler(log_directory / 'system' / 'app.log', logging.DEBUG, max_file_size, backup_count)
		)
		root_logger.addHandler(
			_file_handler(log_directory / 'errors' / 'errors.log', logging.WARNING, max_file_size, backup_count)
		)
