# ✏️ catalog_admin/domain/products/edit_session.py
"""
✏️ Сесія редагування одного товару.

🔹 Стани: `IDLE` (немає сесії) та `EDITING` (рівно один товар у роботі).
🔹 Робоча копія стартує як копія полів зі знімка; мутації не торкаються знімка й сховища.
🔹 Коміт: повний перезапис змінних полів, а не розріджений diff.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                   # 🧱 Value-object сесії
from enum import Enum                                               # 🔖 Стани
from typing import Any, Dict, Tuple                                 # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from .entities import MUTABLE_FIELDS, Product, ProductId


class EditState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass(frozen=True)
class EditSession:
    """Незмінний знімок сесії: кожна зміна поля дає нову сесію."""

    baseline: Product                                               # 🧊 Стан товару на момент початку
    working_copy: Product                                           # ✏️ Те, що піде в PATCH

    @classmethod
    def begin(cls, product: Product) -> "EditSession":
        return cls(baseline=product, working_copy=product)

    @property
    def product_id(self) -> ProductId:
        return self.working_copy.id

    def with_field(self, name: str, value: Any) -> "EditSession":
        return EditSession(baseline=self.baseline, working_copy=self.working_copy.with_field(name, value))

    def changed_fields(self) -> Tuple[str, ...]:
        """Поля, що відрізняються від базової версії (для діагностики)."""
        return tuple(
            name for name in MUTABLE_FIELDS
            if getattr(self.baseline, name) != getattr(self.working_copy, name)
        )

    def commit_payload(self) -> Dict[str, Any]:
        return self.working_copy.to_payload()


__all__ = ["EditSession", "EditState"]
