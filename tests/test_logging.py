"""
Tests for the JSON log formatter.
"""

import json
import logging

from jobboard.core.logging_config import CustomJsonFormatter


def test_json_record_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(module)s %(funcName)s %(message)s')
    record = logging.LogRecord(
        name="jobboard.services.auth_service",
        level=logging.WARNING,
        pathname=__file__,
        lineno=12,
        msg="Login failed for %s",
        args=("alice",),
        exc_info=None,
    )

    line = json.loads(formatter.format(record))

    assert line["message"] == "Login failed for alice"
    assert line["level"] == "WARNING"
    assert line["logger"] == "jobboard.services.auth_service"
    assert "timestamp" in line
    assert "pathname" not in line
