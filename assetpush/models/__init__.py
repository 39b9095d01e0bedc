"""Shared Pydantic models."""

from assetpush.models.base import AssetpushBaseModel
from assetpush.models.results import BaseResult


__all__ = ["AssetpushBaseModel", "BaseResult"]
