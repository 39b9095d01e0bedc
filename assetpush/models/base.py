"""Base model for all assetpush Pydantic models.

This module provides a base model class that enforces consistent validation
behavior across all assetpush models.
"""

from pydantic import BaseModel, ConfigDict


class AssetpushBaseModel(BaseModel):
    """Base model class for all assetpush Pydantic models.

    Fields can be populated by name or by alias so persisted records keep
    their on-disk key names.
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
    )
