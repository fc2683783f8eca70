"""Persistence package."""

from src.infrastructure.persistence.sqlite_stemcell_repository import SQLiteStemcellRepository

__all__ = ["SQLiteStemcellRepository"]
