import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from citygrid import create_app  # noqa: E402
from citygrid.city import Grid  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_citygrid_env(monkeypatch):
    """Keep developer CITYGRID_* exports from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("CITYGRID_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def test_app():
    app = create_app({"TESTING": True, "CITYGRID_SEED": 1234})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def grid():
    return Grid.create(48, 48)


@pytest.fixture()
def rng():
    return random.Random(42)


class FirstChoice(random.Random):
    """Random source that always picks the first variant."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture()
def first_choice_rng():
    return FirstChoice(0)
