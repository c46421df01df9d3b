"""Per-user category management with seeded, read-only defaults."""

from __future__ import annotations

import re
from typing import Any, Optional

from ..constants.categories import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from ..domain.filters import CategoryFilters
from ..errors import DefaultCategoryError, ValidationError
from ..infra.repositories.category import SQLModelCategoryRepository
from ..logging_config import get_logger
from ..models.category import Category

logger = get_logger("services.categories")


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.strip().lower()).strip("-")


def _default_categories() -> list[Category]:
    rows = [(slug, name, "expense", icon) for slug, name, icon in EXPENSE_CATEGORIES]
    rows += [(slug, name, "income", icon) for slug, name, icon in INCOME_CATEGORIES]
    return [
        Category(user_id="", slug=slug, name=name, type=kind, icon=icon, is_default=True)
        for slug, name, kind, icon in rows
    ]


def initialize_default_categories(
    repo: SQLModelCategoryRepository, *, user_id: str
) -> list[Category]:
    """Seed the default categories unless the user already has some."""

    existing = repo.list(user_id=user_id)
    if existing:
        return existing
    logger.info("Seeding default categories for user %s", user_id)
    return repo.create_many(_default_categories(), user_id=user_id)


def get_categories(
    repo: SQLModelCategoryRepository, *, user_id: str, category_type: Optional[str] = None
) -> list[Category]:
    """Return the user's categories, seeding defaults on first use."""

    initialize_default_categories(repo, user_id=user_id)
    return repo.list(user_id=user_id, filters=CategoryFilters(type=category_type))


def create_category(
    repo: SQLModelCategoryRepository,
    *,
    user_id: str,
    name: str,
    category_type: str,
    icon: str = "more-horizontal",
) -> Category:
    slug = slugify(name)
    if not slug:
        raise ValidationError({"name": ["Name must contain letters or digits."]})
    for existing in repo.list(user_id=user_id, filters=CategoryFilters(type=category_type)):
        if existing.slug == slug:
            raise ValidationError({"name": [f"Category '{name}' already exists."]})
    category = Category(
        user_id=user_id, slug=slug, name=name.strip(), type=category_type, icon=icon
    )
    return repo.create(category, user_id=user_id)


def _ensure_custom(repo: SQLModelCategoryRepository, category_id: str, user_id: str, action: str) -> None:
    category = repo.get(category_id, user_id=user_id)
    if category.is_default:
        raise DefaultCategoryError(f"Default categories cannot be {action}")


def update_category(
    repo: SQLModelCategoryRepository, category_id: str, changes: dict[str, Any], *, user_id: str
) -> Category:
    """Rename or re-icon a custom category."""

    _ensure_custom(repo, category_id, user_id, "modified")
    changes = {k: v for k, v in changes.items() if k not in {"is_default", "slug"}}
    if "name" in changes:
        changes["slug"] = slugify(changes["name"])
    return repo.update(category_id, changes, user_id=user_id)


def delete_category(repo: SQLModelCategoryRepository, category_id: str, *, user_id: str) -> bool:
    _ensure_custom(repo, category_id, user_id, "deleted")
    return repo.delete(category_id, user_id=user_id)
