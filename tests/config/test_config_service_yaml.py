"""
🧪 test_config_service_yaml.py: unit-тести для ConfigService

Перевіряє:
- Читання вкладених ключів через крапку
- Перекриття YAML змінними середовища
- Singleton і скидання через reset()
"""

import pytest

from catalog_admin.config import ConfigService
from catalog_admin.config.config_service import DEFAULT_CONFIG_PATH

YAML_TEXT = """
api:
  base_url: http://yaml.test
  timeout_sec: 5
catalog:
  default_filters:
    min_price: 0
    max_price: 500
"""


@pytest.fixture(autouse=True)
def _fresh_singleton(monkeypatch):
    monkeypatch.delenv("CATALOG_API_URL", raising=False)
    monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def yaml_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(YAML_TEXT, encoding="utf-8")
    return path


def test_dotted_keys_and_defaults(yaml_path):
    config = ConfigService(yaml_path)

    assert config.get("api.base_url") == "http://yaml.test"
    assert config.get("catalog.default_filters.max_price") == 500
    assert config.get("api.missing", "fallback") == "fallback"
    assert config.get("api.base_url.deeper") is None


def test_env_overrides_yaml(yaml_path, monkeypatch):
    monkeypatch.setenv("CATALOG_API_URL", "http://env.test")
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "DEBUG")

    config = ConfigService(yaml_path)

    assert config.get("api.base_url") == "http://env.test"
    assert config.get("api.timeout_sec") == 5
    assert config.get("logging.level") == "DEBUG"


def test_singleton_until_reset(yaml_path, tmp_path):
    first = ConfigService(yaml_path)
    assert ConfigService(tmp_path / "ignored.yaml") is first

    ConfigService.reset()
    assert ConfigService(tmp_path / "ignored.yaml") is not first


def test_missing_file_gives_empty_config(tmp_path):
    config = ConfigService(tmp_path / "nope.yaml")
    assert config.get("api.base_url", "default") == "default"


def test_bundled_defaults():
    config = ConfigService(DEFAULT_CONFIG_PATH)

    assert config.get("api.base_url") == "http://localhost:3001"
    assert config.get("collections.products") == "products"
    assert config.get("catalog.low_stock_threshold") == 10
