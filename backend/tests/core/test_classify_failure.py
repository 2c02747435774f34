"""Failure Classification - every exception maps to one FailureKind."""

import pytest

from shelter_api.core.classify_failure import classify_failure
from shelter_api.core.domain_types import FailureKind
from shelter_api.core.errors import DataAccessError


@pytest.mark.parametrize(
    "exc, kind",
    [
        (ConnectionError("reset"), FailureKind.CONNECTIVITY),
        (TimeoutError(), FailureKind.CONNECTIVITY),
        (OSError("no route"), FailureKind.CONNECTIVITY),
        (KeyError("name"), FailureKind.QUERY),
        (ValueError("bad"), FailureKind.QUERY),
        (TypeError("bad"), FailureKind.QUERY),
        (RuntimeError("?"), FailureKind.UNEXPECTED),
    ],
)
def test_builtin_exceptions(exc, kind):
    assert classify_failure(exc) == kind


def test_data_access_error_keeps_assigned_kind():
    exc = DataAccessError("driver", "find", FailureKind.DRIVER)
    assert classify_failure(exc) == FailureKind.DRIVER
