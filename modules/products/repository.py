"""
Product repository for database access.

Encapsulates all Supabase queries for the `user_products` table.

Updates and deletes are owner-scoped: the owner id is part of the write
filter, so the ownership check and the mutation are one statement.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import MediaType, Product

TABLE = "user_products"


class ProductRepository(BaseRepository[Product]):
    """
    Repository for product data access.

    All methods return Pydantic models mapped from database rows.
    """

    def create(self, data: dict[str, Any]) -> Product:
        """
        Insert a product row.

        Args:
            data: Column values, including user_profile_id.

        Returns:
            The created Product with generated ID and timestamps.
        """
        result = self._db.table(TABLE).insert(data).execute()
        return self._map_to_product(result.data[0])

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID regardless of owner."""
        result = self._db.table(TABLE).select("*").eq("id", product_id).limit(1).execute()

        if not result.data:
            return None

        return self._map_to_product(result.data[0])

    def update_owned(
        self,
        product_id: str,
        owner_id: str,
        data: dict[str, Any],
    ) -> Optional[Product]:
        """
        Update a product only if it belongs to owner_id.

        Returns:
            The updated Product, or None if no row matched id and owner.
        """
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = (
            self._db.table(TABLE)
            .update(payload)
            .eq("id", product_id)
            .eq("user_profile_id", owner_id)
            .execute()
        )

        if not result.data:
            return None

        return self._map_to_product(result.data[0])

    def delete_owned(self, product_id: str, owner_id: str) -> bool:
        """
        Delete a product only if it belongs to owner_id.

        Returns:
            True if a row was deleted.
        """
        result = (
            self._db.table(TABLE)
            .delete()
            .eq("id", product_id)
            .eq("user_profile_id", owner_id)
            .execute()
        )
        return bool(result.data)

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        media_type = data.get("media_type")
        return Product(
            id=str(data["id"]),
            user_profile_id=str(data["user_profile_id"]),
            title=data["title"],
            description=data.get("description"),
            price=Decimal(str(data.get("price") or 0)),
            currency=data.get("currency") or "RUB",
            media_url=data.get("media_url"),
            media_type=MediaType(media_type) if media_type else None,
            link=data.get("link"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )
