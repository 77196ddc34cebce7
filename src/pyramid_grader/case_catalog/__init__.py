"""Case catalog domain exports."""

from .fixture_reader import CaseFixtureError, read_case_fixture
from .fixture_writer import build_case_fixture, write_case_fixture
from .pyramid_cases import build_pyramid, default_pyramid_cases
from .testcase_models import TestCase

__all__ = [
    "TestCase",
    "CaseFixtureError",
    "build_pyramid",
    "default_pyramid_cases",
    "read_case_fixture",
    "build_case_fixture",
    "write_case_fixture",
]
