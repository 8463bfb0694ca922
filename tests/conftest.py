import os

import pytest

from generic_adapter.internals import config

# Guards raise instead of exiting unless a test opts into strict mode.
os.environ.pop(config.STRICT_ENV, None)


@pytest.fixture(autouse=True)
def _fresh_config():
    config.reset_config()
    yield
    config.reset_config()
