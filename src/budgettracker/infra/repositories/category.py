"""SQLModel implementation of Category repository."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import select

from ...domain.filters import CategoryFilters
from ...models.category import Category
from .base import SQLModelRecordRepository


class SQLModelCategoryRepository(SQLModelRecordRepository):
    """SQLModel-based category repository implementation."""

    model: ClassVar[type[Category]] = Category
    entity: ClassVar[str] = "Category"

    def _clauses(self, filters: Optional[CategoryFilters]) -> list:
        if filters is None or filters.type is None:
            return []
        return [Category.type == filters.type]

    def _ordering(self) -> list:
        return [Category.type.asc(), Category.name.asc()]  # type: ignore[attr-defined]

    def create_many(self, categories: list[Category], *, user_id: str) -> list[Category]:
        """Insert several categories in one transaction."""
        with self.session_factory() as session:
            for category in categories:
                category.user_id = user_id
                session.add(category)
            session.commit()
            for category in categories:
                session.refresh(category)
            session.expunge_all()
            return categories

    def get_by_slug(self, slug: str, *, user_id: str) -> Optional[Category]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Category).where(Category.user_id == user_id, Category.slug == slug)
            ).first()
            if obj:
                session.expunge(obj)
            return obj
