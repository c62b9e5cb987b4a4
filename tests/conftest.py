import pytest

from motifvec.config import ENV_VAR, reset_config


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    """Every test starts from built-in config defaults."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()
