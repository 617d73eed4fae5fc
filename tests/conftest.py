import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import nameparts
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparts import FullNameParser
from nameparts.services import DataInitializationService, DiagnosticReporter
from nameparts.types import ParsedName


@pytest.fixture(scope="session")
def parser():
    return FullNameParser()


@pytest.fixture(scope="session")
def name_lists():
    return DataInitializationService.load()


@pytest.fixture
def parsed():
    return ParsedName()


@pytest.fixture
def reporter(parsed):
    return DiagnosticReporter(parsed)
