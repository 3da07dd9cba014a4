"""Shared fixtures for logger tests"""

import json
import re

import pytest

from tagged_logger import Logger

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class CaptureStream:
    """Stream capturing written chunks."""

    def __init__(self):
        self.output = ""
        self.writes = []

    def write(self, chunk: str) -> int:
        self.output += chunk
        self.writes.append(chunk)
        return len(chunk)

    @property
    def lines(self):
        return self.output.splitlines()


def strip_ansi(text: str) -> str:
    return ANSI_PATTERN.sub("", text)


def parse_json_line(line: str) -> dict:
    return json.loads(line)


@pytest.fixture
def stdout():
    return CaptureStream()


@pytest.fixture
def stderr():
    return CaptureStream()


@pytest.fixture
def make_logger(stdout, stderr):
    """Build a logger writing to the capture streams."""

    def factory(**options):
        options.setdefault("log_level", "debug")
        options.setdefault("environ", {})
        return Logger(stdout=stdout, stderr=stderr, **options)

    return factory


@pytest.fixture
def logger(make_logger):
    return make_logger(module="Test")
