# 📦 catalog_admin/domain/products/entities.py
"""
📦 Доменні сутності каталогу: товар, чернетка товару, інформація про магазин.

🔹 `Product`: повна (не розріджена) копія запису зі знімка; ціна: `Decimal`, склад: `int`.
🔹 `ProductDraft`: payload для створення з перевірками форми додавання товару.
🔹 `StoreInfo`: лише для читання, перший елемент колекції `store_info`.
🔹 Усі сутності іммʼютабельні (frozen dataclass); зміни: через `with_field` / `replace`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування кроків валідації
from dataclasses import dataclass, fields, replace                  # 🧱 Опис сутностей
from decimal import Decimal, InvalidOperation                       # 💰 Робота з цінами
from typing import Any, Dict, Mapping, Tuple, Union                 # 🧰 Типізація
from urllib.parse import urlparse                                   # 🌐 Перевірка URL зображення

# 🧩 Внутрішні модулі проєкту
from catalog_admin.errors import ValidationError
from catalog_admin.shared.utils.logger import LOG_NAME

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.products")


ProductId = Union[int, str]                                         # 🆔 Непрозорий ідентифікатор сховища

# ✏️ Поля, які можна змінювати (і які йдуть у повний PATCH)
MUTABLE_FIELDS: Tuple[str, ...] = (
    "name",
    "description",
    "category",
    "price",
    "stock",
    "image",
    "featured",
)


# ================================
# 🧽 КОНВЕРТЕРИ ПОЛІВ
# ================================
def to_decimal(value: Any, field_name: str = "price") -> Decimal:
    """Приводить число/рядок до Decimal (через str, щоб не тягнути похибку float)."""
    if isinstance(value, bool):
        raise ValidationError(field_name, f"{field_name} must be a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(field_name, f"{field_name} must be a number") from None
    if not result.is_finite():
        raise ValidationError(field_name, f"{field_name} must be a number")
    return result


def _to_int(value: Any, field_name: str = "stock") -> int:
    if isinstance(value, bool):
        raise ValidationError(field_name, f"{field_name} must be an integer")
    try:
        number = to_decimal(value, field_name)
    except ValidationError:
        raise ValidationError(field_name, f"{field_name} must be an integer") from None
    if number != number.to_integral_value():
        raise ValidationError(field_name, f"{field_name} must be an integer")
    return int(number)


def to_bool(value: Any, field_name: str = "featured") -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValidationError(field_name, f"{field_name} must be a boolean")


def _to_text(value: Any, field_name: str) -> str:
    if value is None:
        raise ValidationError(field_name, f"{field_name} must be text")
    return str(value)


def price_to_wire(price: Decimal) -> Union[int, float]:
    """💱 JSON не знає Decimal: ціле → int, інакше → float."""
    if price == price.to_integral_value():
        return int(price)
    return float(price)


_COERCERS = {
    "name": lambda v: _to_text(v, "name"),
    "description": lambda v: _to_text(v, "description"),
    "category": lambda v: _to_text(v, "category"),
    "price": to_decimal,
    "stock": _to_int,
    "image": lambda v: _to_text(v, "image"),
    "featured": to_bool,
}


def is_valid_url(value: str) -> bool:
    """🌐 True для абсолютного URL зі схемою та хостом (або `data:`/`file:` зі шляхом)."""
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    return bool(parsed.netloc or parsed.path)


# ================================
# 🛍️ ТОВАР
# ================================
@dataclass(frozen=True)
class Product:
    """
    🛍️ Товар каталогу, структурно повна копія останнього знімка.

    `id` призначає сховище; він незмінний і не входить у `to_payload()`.
    """

    id: ProductId
    name: str
    description: str
    category: str
    price: Decimal
    stock: int
    image: str
    featured: bool

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Product":
        """Будує товар із JSON-запису; розріджений запис → `ValidationError`."""
        missing = [name for name in ("id",) + MUTABLE_FIELDS if name not in record]
        if missing:
            logger.warning("🕳️ Sparse product record rejected", extra={"missing": missing})
            raise ValidationError(
                missing[0],
                f"{missing[0]} is missing from the product record",
                errors={name: f"{name} is missing from the product record" for name in missing},
            )
        values = {name: _COERCERS[name](record[name]) for name in MUTABLE_FIELDS}
        return cls(id=record["id"], **values)

    def with_field(self, name: str, value: Any) -> "Product":
        """✏️ Повертає копію з одним зміненим (і приведеним до типу) полем."""
        if name not in MUTABLE_FIELDS:
            raise ValidationError(name, f"{name} is not an editable product field")
        return replace(self, **{name: _COERCERS[name](value)})

    def to_payload(self) -> Dict[str, Any]:
        """📦 Повний набір змінних полів для PATCH (без `id`)."""
        payload = {name: getattr(self, name) for name in MUTABLE_FIELDS}
        payload["price"] = price_to_wire(self.price)
        return payload

    def to_record(self) -> Dict[str, Any]:
        record = {"id": self.id}
        record.update(self.to_payload())
        return record


# ================================
# 📝 ЧЕРНЕТКА ДЛЯ СТВОРЕННЯ
# ================================
@dataclass(frozen=True)
class ProductDraft:
    """📝 Дані форми «Додати товар»: без `id`, його видасть сховище."""

    name: str = ""
    description: str = ""
    category: str = ""
    price: Decimal = Decimal("0")
    stock: int = 0
    image: str = ""
    featured: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProductDraft":
        """Будує чернетку з довільної мапи; невідомі ключі (у т.ч. `id`) ігноруються."""
        known = {f.name for f in fields(cls)}
        values = {name: _COERCERS[name](value) for name, value in data.items() if name in known}
        return cls(**values)

    def validate(self) -> Dict[str, str]:
        """Повертає всі помилки форми: поле → повідомлення (порожньо: валідно)."""
        errors: Dict[str, str] = {}
        if not self.name.strip():
            errors["name"] = "Product name is required"
        if not self.description.strip():
            errors["description"] = "Product description is required"
        if not self.category:
            errors["category"] = "Category is required"
        if self.price <= 0:
            errors["price"] = "Price must be greater than 0"
        if self.stock < 0:
            errors["stock"] = "Stock cannot be negative"
        if not self.image.strip():
            errors["image"] = "Image URL is required"
        elif not is_valid_url(self.image):
            errors["image"] = "Please enter a valid image URL"
        return errors

    def ensure_valid(self) -> "ProductDraft":
        errors = self.validate()
        if errors:
            field_name = next(iter(errors))
            logger.info("🧾 Product draft rejected", extra={"fields": list(errors)})
            raise ValidationError(field_name, errors[field_name], errors=errors)
        return self

    def to_payload(self) -> Dict[str, Any]:
        payload = {name: getattr(self, name) for name in MUTABLE_FIELDS}
        payload["price"] = price_to_wire(self.price)
        return payload


# ================================
# 🏪 ІНФОРМАЦІЯ ПРО МАГАЗИН
# ================================
@dataclass(frozen=True)
class StoreInfo:
    """🏪 Оператор каталогу. Шляху для змін немає."""

    name: str = ""
    description: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "StoreInfo":
        return cls(
            name=str(record.get("name") or ""),
            description=str(record.get("description") or ""),
            phone=str(record.get("phone_number") or record.get("phone") or ""),
            email=str(record.get("email") or ""),
            address=str(record.get("address") or ""),
        )


__all__ = [
    "MUTABLE_FIELDS",
    "Product",
    "ProductDraft",
    "ProductId",
    "StoreInfo",
    "is_valid_url",
    "price_to_wire",
    "to_bool",
    "to_decimal",
]
