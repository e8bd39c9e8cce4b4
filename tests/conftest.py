import pytest

ENV_VARS = ("DH_PARAMS_PEM", "DH_PRIME", "DH_GENERATOR", "DHKEX_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv then delenv so teardown also removes anything load_dotenv() sets
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
