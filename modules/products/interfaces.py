"""
Products module interface.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import Profile

from .models import Product, ProductInput


@runtime_checkable
class IProductService(Protocol):
    """Interface for product mutations on behalf of an authenticated profile."""

    async def create_product(self, profile: Profile, product: ProductInput) -> Product:
        """
        Create a product owned by profile.

        Raises:
            NotEntitledError: If profile is not premium
        """
        ...

    async def update_product(
        self,
        profile: Profile,
        product_id: str,
        product: ProductInput,
    ) -> Product:
        """
        Replace the editable fields of a product owned by profile.

        Raises:
            NotEntitledError: If profile is not premium
            ProductNotFoundError: If the product is missing or not owned
        """
        ...

    async def delete_product(self, profile: Profile, product_id: str) -> None:
        """
        Delete a product owned by profile.

        Raises:
            NotEntitledError: If profile is not premium
            ProductNotFoundError: If the product is missing or not owned
        """
        ...
