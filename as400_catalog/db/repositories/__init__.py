"""Database repositories."""

from as400_catalog.db.repositories.catalog import CatalogRepository

__all__ = ["CatalogRepository"]
