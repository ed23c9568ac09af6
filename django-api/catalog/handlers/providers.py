from catalog.services import CatalogService
from catalog.stores import DjangoCatalogStore


def get_catalog_service() -> CatalogService:
    """Build a service over the Django store for the current request."""
    return CatalogService(DjangoCatalogStore())
