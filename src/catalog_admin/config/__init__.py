# ⚙️ catalog_admin/config/__init__.py
"""
⚙️ Пакет Config: централізована конфігурація та збирання залежностей.

Цей пакет відповідає за:
- Завантаження налаштувань (.env, config.yaml).
- Створення та зв'язування сервісів через DI-контейнер.
"""

from .config_service import ConfigService

__all__ = ["ConfigService"]
