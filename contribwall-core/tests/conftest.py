"""Keep every test away from the real environment and ~/.contribwall."""

import pytest

import contribwall.config as config_module


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in config_module.TOKEN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "no-such-config.yaml")
    return tmp_path
