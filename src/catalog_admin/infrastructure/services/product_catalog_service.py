# 🗂️ catalog_admin/infrastructure/services/product_catalog_service.py
"""
🗂️ ProductCatalogService: локальний знімок товарів, фільтрація та сесія редагування.

🎯 Призначення:
    • тримає матеріалізований знімок колекції `products` (повна заміна на кожен refresh);
    • будує похідний відфільтрований перегляд на вимогу (чиста функція над знімком);
    • керує єдиною сесією редагування: begin → edit_field → commit / cancel.

⚙️ Правила:
    • після кожної успішної мутації (create / commit / delete) викликається `refresh()`;
    • провалений коміт НЕ скидає сесію: робоча копія лишається для повтору чи скасування;
    • delete товару, що саме редагується, після успіху примусово скасовує його сесію;
    • невдалий refresh лишає попередній знімок, помилка видна в стані виконавця.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи сервісу
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Set, Tuple, Union  # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from catalog_admin.domain.products import (
    EditSession,
    EditState,
    FilterCriteria,
    Product,
    ProductDraft,
    ProductId,
    StoreInfo,
    apply_filters,
    derive_categories,
)
from catalog_admin.domain.products.services import DashboardStats, compute_dashboard_stats
from catalog_admin.domain.products.services.dashboard_stats import (
    FEATURED_PREVIEW_LIMIT,
    LOW_STOCK_THRESHOLD,
)
from catalog_admin.errors import ValidationError
from catalog_admin.infrastructure.api import CatalogApi, RequestExecutor
from catalog_admin.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.catalog")


def _decode_snapshot(records: Iterable[Mapping[str, Any]]) -> Tuple[Product, ...]:
    return tuple(Product.from_record(record) for record in records)


class ProductCatalogService:
    """🗂️ Рушій запитів і редагування поверх `CatalogApi`."""

    def __init__(
        self,
        api: CatalogApi,
        *,
        criteria: Optional[FilterCriteria] = None,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        featured_limit: int = FEATURED_PREVIEW_LIMIT,
    ) -> None:
        self._api = api
        self._default_criteria = criteria or FilterCriteria()
        self._criteria = self._default_criteria
        self._snapshot: Tuple[Product, ...] = ()                    # 📸 Останній знімок
        self._session: Optional[EditSession] = None                 # ✏️ Активна сесія (≤ 1)
        self._image_failures: Set[ProductId] = set()                # 🖼️ id з «битими» картинками
        self._store_info: Optional[StoreInfo] = None
        self._low_stock_threshold = int(low_stock_threshold)
        self._featured_limit = int(featured_limit)

    # ================================
    # 📊 СТАН
    # ================================
    @property
    def executor(self) -> RequestExecutor:
        return self._api.executor

    @property
    def snapshot(self) -> Tuple[Product, ...]:
        return self._snapshot

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def session(self) -> Optional[EditSession]:
        return self._session

    @property
    def edit_state(self) -> EditState:
        return EditState.EDITING if self._session is not None else EditState.IDLE

    @property
    def store_info(self) -> Optional[StoreInfo]:
        return self._store_info

    @property
    def image_failures(self) -> FrozenSet[ProductId]:
        return frozenset(self._image_failures)

    # ================================
    # 🔄 ЗНІМОК
    # ================================
    async def refresh(self) -> Tuple[Product, ...]:
        """
        Повністю замінює знімок результатом `list`; без злиття зі старим.

        Розріджений запис дає `ValidationError` у стані виконавця, старий знімок лишається.
        """
        snapshot = await self._api.get_products(decode=_decode_snapshot)
        self._snapshot = snapshot
        logger.info("📸 Snapshot refreshed: %d products", len(snapshot))
        return snapshot

    def find(self, product_id: ProductId) -> Optional[Product]:
        for product in self._snapshot:
            if product.id == product_id:
                return product
        return None

    async def fetch_product(self, product_id: ProductId) -> Product:
        """Один товар напряму зі сховища (знімок не змінюється)."""
        return await self._api.get_product(product_id, decode=Product.from_record)

    async def load_store_info(self) -> Optional[StoreInfo]:
        record = await self._api.get_store_info()
        self._store_info = StoreInfo.from_record(record) if record is not None else None
        return self._store_info

    # ================================
    # 🔎 ФІЛЬТРАЦІЯ
    # ================================
    def update_filters(self, **changes: Any) -> FilterCriteria:
        self._criteria = self._criteria.with_changes(**changes)
        logger.debug("🎛️ Filters updated: %s", self._criteria)
        return self._criteria

    def reset_filters(self) -> FilterCriteria:
        self._criteria = self._default_criteria
        return self._criteria

    def view(self, criteria: Optional[FilterCriteria] = None) -> Tuple[Product, ...]:
        return apply_filters(self._snapshot, criteria or self._criteria)

    def categories(self) -> FrozenSet[str]:
        return derive_categories(self._snapshot)

    def dashboard(self) -> DashboardStats:
        return compute_dashboard_stats(
            self._snapshot,
            low_stock_threshold=self._low_stock_threshold,
            featured_limit=self._featured_limit,
        )

    # ================================
    # ✏️ СЕСІЯ РЕДАГУВАННЯ
    # ================================
    def begin_edit(self, product_id: ProductId) -> EditSession:
        """Починає сесію для товару зі знімка; активну сесію замінює без питань."""
        product = self.find(product_id)
        if product is None:
            raise ValidationError("id", f"Product {product_id} is not in the current snapshot")
        if self._session is not None and self._session.product_id != product_id:
            logger.debug("✏️ Edit session for %r replaced by %r", self._session.product_id, product_id)
        self._session = EditSession.begin(product)
        return self._session

    def edit_field(self, name: str, value: Any) -> EditSession:
        """Змінює поле робочої копії; знімок і сховище не зачіпаються."""
        session = self._require_session()
        self._session = session.with_field(name, value)
        return self._session

    def cancel_edit(self) -> None:
        if self._session is not None:
            logger.debug("↩️ Edit session for %r cancelled", self._session.product_id)
        self._session = None

    async def commit_edit(self) -> Product:
        """
        Надсилає повний набір змінних полів робочої копії через PATCH.

        Успіх → сесія скидається, знімок оновлюється. Збій → виняток іде вище,
        а сесія лишається з тією ж робочою копією.
        """
        session = self._require_session()
        changed = session.changed_fields()
        logger.info("💾 Committing product %r (changed: %s)", session.product_id, ", ".join(changed) or "-")
        await self._api.update_product(session.product_id, session.commit_payload())

        if self._session is session:                                # 🧷 Не чіпаємо сесію, розпочату під час await
            self._session = None
        if "image" in changed:
            self._image_failures.discard(session.product_id)
        await self.refresh()
        return self.find(session.product_id) or session.working_copy

    def _require_session(self) -> EditSession:
        if self._session is None:
            raise ValidationError("session", "No edit session in progress")
        return self._session

    # ================================
    # ➕➖ СТВОРЕННЯ / ВИДАЛЕННЯ
    # ================================
    async def create(self, draft: Union[ProductDraft, Mapping[str, Any]]) -> Product:
        """Валідує чернетку, створює запис (id видає сховище) і оновлює знімок."""
        if not isinstance(draft, ProductDraft):
            draft = ProductDraft.from_mapping(draft)
        draft.ensure_valid()
        stored = await self._api.create_product(draft.to_payload())
        logger.info("➕ Product created with id=%r", stored.get("id"))
        await self.refresh()
        created = self.find(stored.get("id"))
        if created is not None:
            return created
        return Product.from_record({**draft.to_payload(), **stored})

    async def delete(self, product_id: ProductId) -> None:
        """Видаляє товар незалежно від сесії; сесію цього товару після успіху скасовано."""
        await self._api.delete_product(product_id)
        if self._session is not None and self._session.product_id == product_id:
            logger.info("🗑️ Product %r deleted while being edited; edit session cancelled", product_id)
            self._session = None
        self._image_failures.discard(product_id)
        await self.refresh()

    # ================================
    # 🖼️ ЗБОЇ ЗОБРАЖЕНЬ
    # ================================
    def mark_image_failed(self, product_id: ProductId) -> None:
        """Рендерер повідомляє, що картинку товару не вдалося завантажити."""
        self._image_failures.add(product_id)

    def has_image_failed(self, product_id: ProductId) -> bool:
        return product_id in self._image_failures


__all__ = ["ProductCatalogService"]
