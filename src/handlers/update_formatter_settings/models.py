from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class UpdateFormatterSettingsRequest(BaseModel):
    """Validation model for update formatter settings request.

    ``settings`` is only checked for shape here; the values themselves are
    validated against the pager configuration by the service.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    field_id: StrictStr = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Field instance identifier",
    )
    settings: dict[str, Any] = Field(
        default_factory=dict,
        description="Settings overrides keyed by settings key",
    )

    @field_validator("field_id")
    @classmethod
    def validate_field_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field_id must not be blank")
        return value
