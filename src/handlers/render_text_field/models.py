"""
Pydantic models for the render text field request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.models.field import TextItem


class RenderTextFieldRequest(BaseModel):
    """
    Validation model for render text field API.

    The page index itself is NOT part of this model: it is read from the
    query parameter named by the field's ``pageIndexName`` setting.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    field_id: StrictStr = Field(..., min_length=1, max_length=255)

    field_type: Literal["text", "text_long", "text_with_summary"] = Field(
        default="text",
        description="Text field type being rendered",
    )

    items: list[TextItem] = Field(
        default_factory=list,
        description="Field deltas in display order",
    )

    langcode: StrictStr = Field(
        "en",
        min_length=2,
        max_length=12,
        description="Language for pager labels",
    )

    @field_validator("field_id")
    @classmethod
    def validate_field_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field_id must not be blank")
        return value
