"""Repository layer exports."""

from repositories.asset_repository import AssetRepository

__all__ = ["AssetRepository"]
