"""Shared fixtures for the cloud_utils test suite."""

import pytest

from cloud_utils import HandlerHelper


class RecordingLogger:
    """Logger double that remembers every warn/error call."""

    def __init__(self):
        self.warnings = []
        self.errors = []

    def warn(self, value):
        self.warnings.append(value)

    def error(self, value):
        self.errors.append(value)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def helper(logger) -> HandlerHelper:
    return HandlerHelper(logger=logger)
