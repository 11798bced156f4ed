"""Field content models consumed by the paginated formatters."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TextItem(BaseModel):
    """One delta of a text, text_long or text_with_summary field."""

    model_config = ConfigDict(str_strip_whitespace=False)

    value: StrictStr = Field(..., description="Raw text of the item")
    format: StrictStr | None = Field(None, description="Text format machine name")
    langcode: StrictStr = Field("und", description="Language code of the item")


class EntityReference(BaseModel):
    """One delta of an entity_reference or entity_reference_revisions field."""

    target_type: StrictStr = Field(..., min_length=1, description="Referenced entity type")
    target_id: StrictStr = Field(..., min_length=1, description="Referenced entity ID")
    target_revision_id: StrictStr | None = Field(
        None,
        description="Referenced revision ID (revision references only)",
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Structured data attributes of the item, e.g. RDFa mappings",
    )


class FieldContext(BaseModel):
    """Where a field lives: its host entity and field name."""

    host_entity_type: StrictStr = Field(..., description="Entity type holding the field")
    host_bundle: StrictStr = Field(..., description="Bundle holding the field")
    host_entity_id: StrictStr = Field(..., description="ID of the host entity")
    field_name: StrictStr = Field(..., description="Machine name of the field")
    langcode: StrictStr = Field("und", description="Language the field is viewed in")


class ContentEntity(BaseModel):
    """A loaded entity as returned by an EntityViewRepository."""

    entity_type: StrictStr
    entity_id: StrictStr
    revision_id: StrictStr | None = None
    langcode: StrictStr = "und"
    is_new: StrictBool = False
    canonical_url: StrictStr | None = Field(
        None,
        description="Canonical URL, None if the type has no canonical link template",
    )
