import pytest

from preflight_core import config
from platform_adapters import reset_adapter


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the global config at an empty temp location for every test."""
    config.reset_config()
    config._config_instance = config.ConfigManager(tmp_path / "config.json")
    reset_adapter()

    yield config._config_instance

    config.reset_config()
    reset_adapter()
