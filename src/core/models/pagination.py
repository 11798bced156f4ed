"""Pagination plan and view models."""

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt

from core.models.config import PagerConfig

LinkKind = Literal["first", "previous", "page", "next", "last"]


class NavLink(BaseModel):
    """One navigation control pointing at another page index."""

    kind: LinkKind = Field(..., description="Link role within the pager")
    label: str | int = Field(..., description="Visible text, 1-based number for page links")
    target_index: StrictInt = Field(..., ge=0, description="0-based index the link points to")
    is_current: StrictBool = Field(False, description="Whether the link points at the current page")
    accessibility_label: str | None = Field(None, description="aria-label for the link")
    href: str | None = Field(None, description="Target URL, set during view assembly")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="HTML attributes rendered on the link",
    )


class PagerPlan(BaseModel):
    """Result of planning one render: the selected index and its links."""

    total_items: StrictInt = Field(..., ge=0, description="Number of selectable items")
    resolved_index: StrictInt | None = Field(
        None,
        description="Validated 0-based index, None when there is nothing to select",
    )
    links: list[NavLink] = Field(default_factory=list, description="Ordered navigation links")


class PagerView(BaseModel):
    """View-model handed to the template layer."""

    total_items: StrictInt = Field(..., ge=0)
    resolved_index: StrictInt | None = Field(None)
    navigation_links: list[NavLink] = Field(default_factory=list)
    config: PagerConfig
    selected_content: Any = Field(None, description="Render element for the selected item")
    summary: str | None = Field(None, description='"Page X of N" text when enabled')
    item_attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Structured data attributes of the selected item",
    )
    resource_url: str | None = Field(
        None,
        description="RDFa resource of the selected entity, when one was added",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for JSON responses, with settings keys for the config."""
        payload = self.model_dump(exclude={"config"})
        payload["config"] = self.config.to_settings()
        return payload
