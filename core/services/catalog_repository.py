# =============================================================================
# core/services/catalog_repository.py - Catalog Data Access
# =============================================================================
# Typed CRUD over the catalog tables in Supabase (PostgREST):
#   brands, categories, medicines, contact_us, users
#
# Every collection exposes the same operations: list, get_by_id, create,
# update, delete. Store failures become RepositoryError; a missing row on
# get/update/delete becomes EntityNotFoundError so workflows can skip
# storage cleanup for data that was never there.
#
# Usage:
#   repo = CatalogRepository(SupabaseClient.get_client())
#   brands = repo.brands.list()
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from supabase import Client

from app.exceptions import EntityNotFoundError, RepositoryError
from core.models.brand import Brand
from core.models.category import Category
from core.models.contact import ContactInquiry
from core.models.medicine import Medicine
from core.models.user import User
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _store_message(error: Exception) -> str:
    """Pull the human-readable message out of a PostgREST error."""
    message = getattr(error, "message", None)
    return message if isinstance(message, str) and message else str(error)


def _joined_count(row: dict[str, Any], relation: str) -> int:
    """
    Read an embedded "relation(count)" aggregate.

    PostgREST returns it as [{"count": n}]; an empty list or a missing key
    means zero.
    """
    embedded = row.pop(relation, None) or []
    if isinstance(embedded, dict):
        embedded = [embedded]
    return int(embedded[0].get("count") or 0) if embedded else 0


def _joined_name(row: dict[str, Any], relation: str) -> str | None:
    embedded = row.pop(relation, None)
    return embedded.get("name") if isinstance(embedded, dict) else None


class TableRepository(Generic[ModelT]):
    """
    CRUD operations for one table.

    Subclasses set the table name, the select clause (including any
    embedded joins), the default ordering and the row -> model mapping.
    """

    table: str = ""
    entity: str = ""
    model: type[BaseModel] = BaseModel
    select_clause: str = "*"
    order_column: str = "name"
    order_desc: bool = False

    def __init__(self, client: Client):
        self.client = client

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _query(self):
        return self.client.table(self.table)

    def _execute(self, query, action: str):
        """Run a query, translating any store failure into RepositoryError."""
        try:
            return query.execute()
        except Exception as e:
            logger.error(f"Failed to {action} {self.table}: {e}")
            raise RepositoryError(
                message=_store_message(e),
                cause=e,
                details={"table": self.table, "action": action},
            )

    def to_entity(self, row: dict[str, Any]) -> ModelT:
        return self.model(**row)

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------

    def list(self, order_by: str | None = None, desc: bool | None = None) -> list[ModelT]:
        """
        Fetch every row in the collection.

        Args:
            order_by: Column to sort by (defaults to the collection's ordering)
            desc: Sort descending (defaults to the collection's direction)
        """
        column = order_by or self.order_column
        descending = self.order_desc if desc is None else desc

        response = self._execute(
            self._query().select(self.select_clause).order(column, desc=descending),
            "list",
        )
        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {self.table}")
        return [self.to_entity(row) for row in rows]

    def get_by_id(self, entity_id: str) -> ModelT:
        """
        Fetch a single row.

        Raises:
            EntityNotFoundError: If no row has this id
            RepositoryError: If the query fails
        """
        entity_id = normalize_uuid(entity_id)
        response = self._execute(
            self._query().select(self.select_clause).eq("id", entity_id).limit(1),
            "fetch",
        )
        rows = response.data or []
        if not rows:
            raise EntityNotFoundError(self.entity, entity_id)
        return self.to_entity(rows[0])

    def insert_row(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it as written (no joined fields).

        Raises:
            RepositoryError: If the insert fails or returns nothing
        """
        response = self._execute(self._query().insert(fields), "insert into")
        rows = response.data or []
        if not rows:
            raise RepositoryError(
                message=f"{self.entity} insert returned no data",
                details={"table": self.table},
            )

        logger.info(f"Created {self.entity.lower()}: {rows[0]['id']}")
        return rows[0]

    def update_row(self, entity_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Update a row and return it as written (no joined fields).

        Raises:
            EntityNotFoundError: If no row has this id
            RepositoryError: If the update fails
        """
        entity_id = normalize_uuid(entity_id)
        response = self._execute(
            self._query().update(fields).eq("id", entity_id),
            "update",
        )
        if not response.data:
            raise EntityNotFoundError(self.entity, entity_id)

        logger.info(f"Updated {self.entity.lower()}: {entity_id}")
        return response.data[0]

    def reread(self, row: dict[str, Any]) -> ModelT:
        """
        Re-read a just-written row so joined fields are present.

        The write has already happened, so a failed re-read falls back to
        the written row instead of reporting an error.
        """
        try:
            return self.get_by_id(row["id"])
        except RepositoryError as e:
            logger.warning(f"Re-read of {self.entity.lower()} {row['id']} failed, returning written row: {e.message}")
            return self.to_entity(row)

    def create(self, fields: dict[str, Any]) -> ModelT:
        """Insert a row and return it with its joined fields."""
        return self.reread(self.insert_row(fields))

    def update(self, entity_id: str, fields: dict[str, Any]) -> ModelT:
        """
        Update a row and return it with its joined fields.

        Raises:
            EntityNotFoundError: If no row has this id
            RepositoryError: If the update fails
        """
        return self.reread(self.update_row(entity_id, fields))

    def delete(self, entity_id: str) -> None:
        """
        Delete a row.

        Raises:
            EntityNotFoundError: If no row has this id
            RepositoryError: If the delete fails
        """
        entity_id = normalize_uuid(entity_id)
        response = self._execute(
            self._query().delete().eq("id", entity_id),
            "delete from",
        )
        if not response.data:
            raise EntityNotFoundError(self.entity, entity_id)

        logger.info(f"Deleted {self.entity.lower()}: {entity_id}")

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def count(self) -> int:
        """Exact number of rows in the collection."""
        response = self._execute(
            self._query().select("id", count="exact").limit(1),
            "count",
        )
        return response.count or 0

    def fetch_column(
        self,
        column: str,
        created_since: datetime | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch a single column for every row, optionally only rows created
        at or after `created_since`.
        """
        query = self._query().select(column)
        if created_since is not None:
            query = query.gte("created_at", created_since.isoformat())

        response = self._execute(query, f"read {column} from")
        return response.data or []

    def recent(self, limit: int, columns: str = "*") -> list[dict[str, Any]]:
        """Newest rows first by created_at."""
        response = self._execute(
            self._query().select(columns).order("created_at", desc=True).limit(limit),
            "read recent",
        )
        return response.data or []


# =============================================================================
# Collections
# =============================================================================

class BrandRepository(TableRepository[Brand]):
    """Brands, with a live count of the medicines that reference them."""

    table = "brands"
    entity = "Brand"
    model = Brand
    select_clause = "*, medicines(count)"

    def to_entity(self, row: dict[str, Any]) -> Brand:
        row = dict(row)
        row["medicine_count"] = _joined_count(row, "medicines")
        return Brand(**row)


class CategoryRepository(TableRepository[Category]):
    """Categories, with a live count of their medicines."""

    table = "categories"
    entity = "Category"
    model = Category
    select_clause = "*, medicines(count)"

    def to_entity(self, row: dict[str, Any]) -> Category:
        row = dict(row)
        row["medicine_count"] = _joined_count(row, "medicines")
        return Category(**row)


class MedicineRepository(TableRepository[Medicine]):
    """Medicines, joined with their category and brand display names."""

    table = "medicines"
    entity = "Medicine"
    model = Medicine
    select_clause = "*, category:categories(name), brand:brands(name)"

    def to_entity(self, row: dict[str, Any]) -> Medicine:
        row = dict(row)
        row["category_name"] = _joined_name(row, "category")
        row["brand_name"] = _joined_name(row, "brand")
        return Medicine(**row)


class ContactRepository(TableRepository[ContactInquiry]):
    """Contact form inquiries, newest first."""

    table = "contact_us"
    entity = "Contact inquiry"
    model = ContactInquiry
    order_column = "created_at"
    order_desc = True


class UserRepository(TableRepository[User]):
    """Application users (mirrors Supabase Auth users)."""

    table = "users"
    entity = "User"
    model = User
    order_column = "created_at"
    order_desc = True

    def get_role(self, user_id: str) -> str | None:
        """
        Return the user's role, or None when the user has no row.

        Raises:
            RepositoryError: If the query fails
        """
        response = self._execute(
            self._query().select("role").eq("id", normalize_uuid(user_id)).limit(1),
            "read role from",
        )
        rows = response.data or []
        return rows[0].get("role") if rows else None


class CatalogRepository:
    """
    One handle over every catalog collection.

    Example:
        repo = CatalogRepository(client)
        repo.medicines.get_by_id(medicine_id)
        repo.categories.list()
    """

    def __init__(self, client: Client):
        self.client = client
        self.brands = BrandRepository(client)
        self.categories = CategoryRepository(client)
        self.medicines = MedicineRepository(client)
        self.contacts = ContactRepository(client)
        self.users = UserRepository(client)
