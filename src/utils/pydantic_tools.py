from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseModelWithMethods(BaseModel):
    """Base model for API payloads that are written out with camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Alias-keyed dict without unset optionals, ready for json.dumps."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
