"""Structured Logging - JSON formatter surfaces error context fields."""

import json
import logging

from shelter_api.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "shelter_api.api.error_handlers", logging.ERROR, __file__, 1,
        "COLLABORATOR_FAILURE: adopters.find failed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_context_fields():
    line = JSONFormatter().format(_record(
        resource="adopters", operation="find", failure_kind="connectivity",
        error_code="COLLABORATOR_FAILURE", path="/api/adopters",
    ))
    payload = json.loads(line)
    assert payload["level"] == "ERROR"
    assert payload["resource"] == "adopters"
    assert payload["failure_kind"] == "connectivity"
    assert payload["path"] == "/api/adopters"


def test_json_formatter_omits_missing_fields():
    payload = json.loads(JSONFormatter().format(_record(resource_id=None)))
    assert "resource_id" not in payload
    assert "exception" not in payload
