import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    # CLI tests bind structlog to CliRunner's streams, which close afterwards.
    yield
    structlog.reset_defaults()
