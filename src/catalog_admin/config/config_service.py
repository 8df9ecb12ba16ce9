# ⚙️ catalog_admin/config/config_service.py
"""
⚙️ config_service.py: Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з config.yaml та змінних середовища (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional      # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# 🔐 Змінна середовища → ключ конфігурації
ENV_OVERRIDES: Dict[str, str] = {
    "CATALOG_API_URL": "api.base_url",
    "CATALOG_LOG_LEVEL": "logging.level",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів проєкту.
    Працює як Singleton: конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None   # 🧩 Singleton-екземпляр

    def __new__(cls, config_path: Optional[Path] = None):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs(config_path or DEFAULT_CONFIG_PATH)
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає Singleton (наступний виклик перечитає файли)."""
        cls._instance = None

    def _load_all_configs(self, config_path: Path) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет: config.yaml → змінні середовища (.env перекриває YAML).
        """
        # --- 1. YAML-файл ---
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
            logger.debug("📘 Завантажено %s", config_path)
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", config_path, e)

        # --- 2. .env змінні ---
        load_dotenv()
        env_vars = {key: os.getenv(env) for env, key in ENV_OVERRIDES.items() if os.getenv(env)}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'api.base_url').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'api.base_url' → {'api': {'base_url': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
