import os
import subprocess
import sys

import pytest
import yaml

from splash_client.core.config import ConfigurationManager, ConfigFileNotFoundError, InvalidYamlError, get_config, get_config_manager
from splash_client.core.exceptions import ConfigurationError


@pytest.fixture(scope="function")
def temp_config_files(tmp_path):
    """
    Writes temporary YAML config files and points the ConfigurationManager singleton at them.
    The shipped configuration is reloaded afterwards so other tests see the real settings.
    """
    original_config_dir = ConfigurationManager.CONFIG_DIR
    original_env = get_config_manager().current_environment
    ConfigurationManager.CONFIG_DIR = str(tmp_path)

    dev_config_content = {
        "splash": {"host": "splash_dev", "port": 8050, "use_tls": False},
        "logging": {"level": "DEBUG"},
        "services": ["service1", "service2"],
    }
    prod_config_content = {
        "splash": {"host": "splash_prod", "port": 443, "use_tls": True},
    }
    with open(os.path.join(tmp_path, "development.yaml"), "w") as f:
        yaml.dump(dev_config_content, f)
    with open(os.path.join(tmp_path, "production.yaml"), "w") as f:
        yaml.dump(prod_config_content, f)
    with open(os.path.join(tmp_path, "invalid.yaml"), "w") as f:
        f.write("splash: {host: 'bad_host', port: 1000")  # Missing closing brace
    with open(os.path.join(tmp_path, "not_dict.yaml"), "w") as f:
        yaml.dump(["list", "instead", "of", "dict"], f)

    yield str(tmp_path)

    ConfigurationManager.CONFIG_DIR = original_config_dir
    ConfigurationManager().load_config(original_env)


def test_singleton_returns_same_instance():
    assert ConfigurationManager() is ConfigurationManager()
    assert ConfigurationManager() is get_config_manager()


def test_shipped_development_config():
    """The development.yaml inside the package points at a local Splash."""
    with open(os.path.join(ConfigurationManager.CONFIG_DIR, "development.yaml")) as f:
        shipped = yaml.safe_load(f)

    assert shipped["splash"]["host"] == "localhost"
    assert shipped["splash"]["port"] == 8050
    assert shipped["splash"]["use_tls"] is False
    assert shipped["splash"]["username"] is None
    assert shipped["logging"]["handlers"]["console"]["enabled"] is True


def test_get_config_reads_shared_manager():
    assert get_config("splash.port") == get_config_manager().get("splash.port")
    assert get_config("no.such.key", 42) == 42


def test_load_development_config_default(temp_config_files, monkeypatch):
    """Development configuration is loaded when APP_ENV is not set."""
    monkeypatch.delenv("APP_ENV", raising=False)
    manager = ConfigurationManager()
    manager.load_config()

    assert manager.current_environment == "development"
    assert manager.get("splash.host") == "splash_dev"
    assert manager.get("splash.port") == 8050
    assert manager.get("non_existent_key") is None
    assert manager.get("non_existent_key", "default_val") == "default_val"


def test_load_production_config_env_var(temp_config_files, monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    manager = ConfigurationManager()
    manager.load_config()

    assert manager.current_environment == "production"
    assert manager.get("splash.host") == "splash_prod"
    assert manager.get("splash.use_tls") is True


def test_load_config_explicit_env_param(temp_config_files, monkeypatch):
    """An explicit env argument wins over APP_ENV."""
    monkeypatch.setenv("APP_ENV", "development")
    manager = ConfigurationManager()
    manager.load_config(env="production")

    assert manager.current_environment == "production"
    assert manager.get("splash.port") == 443


def test_get_nested_value(temp_config_files):
    manager = ConfigurationManager()
    manager.load_config("development")

    assert manager.get("splash") == {"host": "splash_dev", "port": 8050, "use_tls": False}
    assert manager.get("services") == ["service1", "service2"]
    assert manager.get("logging.level") == "DEBUG"


def test_get_non_existent_nested_value(temp_config_files):
    manager = ConfigurationManager()
    manager.load_config("development")

    assert manager.get("splash.non_existent_sub_key") is None
    assert manager.get("splash.host.deeper", "fallback") == "fallback"  # host is not a dict
    assert manager.get("completely.made.up.path", "fallback") == "fallback"


def test_missing_config_file_raises(temp_config_files):
    manager = ConfigurationManager()
    with pytest.raises(ConfigFileNotFoundError) as excinfo:
        manager.load_config("staging")
    assert "staging.yaml" in str(excinfo.value)
    assert isinstance(excinfo.value, ConfigurationError)


def test_invalid_yaml_raises(temp_config_files):
    manager = ConfigurationManager()
    with pytest.raises(InvalidYamlError) as excinfo:
        manager.load_config("invalid")
    assert "Error parsing YAML" in str(excinfo.value)


def test_non_dict_yaml_raises(temp_config_files):
    manager = ConfigurationManager()
    with pytest.raises(InvalidYamlError) as excinfo:
        manager.load_config("not_dict")
    assert "does not contain a valid YAML dictionary" in str(excinfo.value)


def test_failed_load_keeps_previous_settings(temp_config_files):
    manager = ConfigurationManager()
    manager.load_config("development")
    with pytest.raises(InvalidYamlError):
        manager.load_config("not_dict")
    assert manager.get("splash.host") == "splash_dev"


def test_reload_config(temp_config_files, monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    manager = ConfigurationManager()
    manager.load_config()
    assert manager.get("splash.host") == "splash_dev"

    manager.reload_config("production")
    assert manager.current_environment == "production"
    assert manager.get("splash.host") == "splash_prod"

    # Without an argument the APP_ENV selection applies again.
    manager.reload_config()
    assert manager.current_environment == "development"


def test_failed_first_load_is_not_cached(temp_config_files, monkeypatch):
    """A manager whose first load failed never becomes the shared instance."""
    monkeypatch.setattr(ConfigurationManager, "_instance", None)
    monkeypatch.setenv("APP_ENV", "staging")
    with pytest.raises(ConfigFileNotFoundError):
        get_config_manager()
    assert ConfigurationManager._instance is None

    monkeypatch.setenv("APP_ENV", "production")
    assert get_config_manager().get("splash.host") == "splash_prod"


def test_import_does_not_read_configuration():
    """The package imports, and a client builds, even when APP_ENV names no YAML file."""
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
    env = dict(os.environ, APP_ENV="nonexistent", PYTHONPATH=repo_root)
    code = "import splash_client; print(splash_client.SplashClient().connection.base_url)"

    result = subprocess.run([sys.executable, "-c", code], env=env, capture_output=True, text=True)

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "http://localhost:8050"
