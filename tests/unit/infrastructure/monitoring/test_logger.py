import json
import logging
import sys
from datetime import date
from decimal import Decimal

import pytest

from config.settings import Settings
from infrastructure.monitoring.logger import JSONFormatter, setup_logging


def make_record(msg='Report generated', exc_info=None):
    return logging.LogRecord(
        name='application.services.converter',
        level=logging.INFO,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def test_json_formatter_basic_fields():
    output = json.loads(JSONFormatter().format(make_record()))

    assert output['level'] == 'INFO'
    assert output['logger'] == 'application.services.converter'
    assert output['message'] == 'Report generated'
    assert output['line'] == 42
    assert 'timestamp' in output
    assert 'exception' not in output


def test_json_formatter_serializes_extra_data():
    record = make_record()
    record.extra_data = {'day': date(2024, 1, 1), 'rate': Decimal('0.99')}

    output = json.loads(JSONFormatter().format(record))

    assert output['data'] == {'day': '2024-01-01', 'rate': '0.99'}


def test_json_formatter_includes_exception():
    try:
        raise ValueError('bad rate')
    except ValueError:
        record = make_record(exc_info=sys.exc_info())

    output = json.loads(JSONFormatter().format(record))

    assert output['exception']['type'] == 'ValueError'
    assert output['exception']['message'] == 'bad rate'


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    setup_logging(Settings(LOG_LEVEL='warning', LOG_DIRECTORY=None))

    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.handlers[0].level == logging.WARNING


def test_setup_logging_writes_json_files(restore_root_logger, tmp_path):
    setup_logging(Settings(LOG_DIRECTORY=str(tmp_path)))

    logging.getLogger('tests.logger').error('rate fetch failed')
    for handler in restore_root_logger.handlers:
        handler.flush()

    app_log = tmp_path / 'system' / 'app.log'
    error_log = tmp_path / 'errors' / 'errors.log'
    assert json.loads(app_log.read_text().splitlines()[-1])['message'] == 'rate fetch failed'
    assert json.loads(error_log.read_text().splitlines()[-1])['level'] == 'ERROR'
