import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    # The CLI reconfigures structlog globally; undo it between tests
    yield
    structlog.reset_defaults()
