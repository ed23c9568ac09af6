from catalog.services.catalog_service import UNCHANGED, CatalogService, NewSessionFormData

__all__ = ["CatalogService", "NewSessionFormData", "UNCHANGED"]
