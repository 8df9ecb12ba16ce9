# 📜 catalog_admin/shared/utils/logger.py
"""
📜 Єдина схема логування для адмін-клієнта каталогу.

🔹 Ініціалізує кореневий логер `catalog_admin` із консоллю та файловим виводом.
🔹 Підтримує JSON-формат файлу та приглушення сторонніх бібліотек (httpx тощо).
🔹 Надає хелпер для отримання дочірніх логерів через загальний префікс.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 Серіалізація payload логів
import logging									# 🪵 Робота з логерами Python
import sys									# 🧵 Потік stdout
import threading								# 🧵 Захист ініціалізації
from dataclasses import dataclass, field					# 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler			# 📁 Хендлер з ротацією файлів
from pathlib import Path								# 📂 Операції з файловими шляхами
from typing import Any, Dict, Optional, Union				# 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "catalog_admin"						# 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"			# 🖥️ Мінімалістичний консольний формат

_RESERVED_ATTRS = frozenset(
    (
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "levelno", "lineno", "module", "msecs", "message", "msg", "name",
        "pathname", "process", "processName", "relativeCreated", "stack_info",
        "thread", "threadName", "levelname", "funcName", "taskName",
    )
)											# 🚫 Службові поля LogRecord, які не дублюємо в JSON

_lock = threading.Lock()							# 🔒 Блокуємо одночасну ініціалізацію


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = "INFO"							# 🎚️ Глобальний рівень логів
    console: bool = True							# 🖥️ Чи вмикати консольний вивід
    json: bool = False								# 📦 JSON-формат для файлу
    file: Optional[str] = "logs/catalog_admin.log"		# 📁 Шлях до лог-файлу (None → без файлу)
    when: str = "midnight"						# ⏰ Періодичність ротації
    interval: int = 1							# ⏱️ Інтервал ротації
    backup_count: int = 7							# ♻️ Скільки копій зберігати
    encoding: str = "utf-8"							# 🔤 Кодування файлу
    suppress: Dict[str, str] = field(default_factory=dict)	# 🙊 Треті сторони та їх рівні
    console_level: str = "INFO"						# 🖥️ Рівень для консолі
    file_level: str = "DEBUG"						# 📁 Рівень для файлу
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON, додаючи `extra`-поля."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():			# 🔎 Додаємо custom extra-поля
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)					# ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)				# 🔄 Повертаємось до рядка
        if record.exc_info:						# ⚠️ Додаємо інформацію про виняток
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМОЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if isinstance(value, int):
        return value
    level = getattr(logging, str(value).upper(), None)
    return level if isinstance(level, int) else default


def _make_console_handler(fmt: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)			# 🖥️ Потік stdout
    handler.setFormatter(fmt)
    return handler


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))
    log_path.parent.mkdir(parents=True, exist_ok=True)		# 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Dict[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    file_enabled: bool = True,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """Ініціалізує кореневий логер застосунку за єдиною схемою."""
    with _lock:
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=False if json_mode is None else bool(json_mode),
            file=(file or "logs/catalog_admin.log") if file_enabled else None,
            suppress=suppress or {},
            console_level=str(console_level or level or "INFO"),
            file_level=str(file_level or level or "INFO"),
            console_format=console_format or CONSOLE_FORMAT,
            file_format=file_format or PLAIN_FORMAT,
        )

        root_logger = logging.getLogger(LOG_NAME)			# 🏷️ Кореневий логер застосунку
        root_logger.setLevel(
            min(
                _to_level(cfg.level, logging.INFO),
                _to_level(cfg.console_level, logging.INFO),
                _to_level(cfg.file_level, logging.INFO),
            )
        )

        for handler in list(root_logger.handlers):			# 🧹 Прибираємо попередні хендлери
            if isinstance(handler, (logging.StreamHandler, TimedRotatingFileHandler)):
                root_logger.removeHandler(handler)
                handler.close()

        if cfg.console:
            console_handler = _make_console_handler(logging.Formatter(cfg.console_format))
            console_handler.setLevel(_to_level(cfg.console_level, logging.INFO))
            root_logger.addHandler(console_handler)

        if cfg.file:
            fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler.setLevel(_to_level(cfg.file_level, logging.DEBUG))
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.info(
            "✅ Logging initialized | level=%s console=%s/%s json=%s file=%s/%s",
            cfg.level.upper(),
            "ON" if cfg.console else "OFF",
            cfg.console_level.upper(),
            "ON" if cfg.json else "OFF",
            cfg.file or "OFF",
            cfg.file_level.upper(),
        )
        return root_logger


def init_logging_from_config(config: Optional[Dict[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування на базі словника з конфігураційного сервісу.

    Args:
        config: Налаштування розділу `logging` із ConfigService.

    Returns:
        logging.Logger: Кореневий логер, проініціалізований за наданими параметрами.
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        file_enabled=bool(node.get("file_enabled", True)),
        suppress=node.get("suppress"),
        console_level=node.get("console_level"),
        file_level=node.get("file_level"),
        console_format=node.get("console_format"),
        file_format=node.get("file_format"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер із префіксом `LOG_NAME`."""
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)
