from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class GetFormatterSettingsRequest(BaseModel):
    """Validation model for get formatter settings request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    field_id: StrictStr = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Field instance identifier",
    )
    langcode: StrictStr = Field(
        "en",
        min_length=2,
        max_length=12,
        description="Language used for titles and summary lines",
    )

    @field_validator("field_id")
    @classmethod
    def validate_field_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field_id must not be blank")
        return value


class FormatterSettingsResponse(BaseModel):
    """Effective settings plus what the settings UI needs to edit them."""

    field_id: str
    settings: dict[str, object]
    summary: list[str]
    form: dict[str, dict[str, object]]
