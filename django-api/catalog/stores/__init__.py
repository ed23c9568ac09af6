from catalog.stores.django_store import DjangoCatalogStore
from catalog.stores.interfaces import CatalogStore

__all__ = ["CatalogStore", "DjangoCatalogStore"]
