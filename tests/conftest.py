import pytest

from ledger_tracker.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep a stray ./ledgerly.yaml or LEDGER_* variable out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
