"""Abstract contract for loading and rendering referenced entities."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from core.models.field import ContentEntity

if TYPE_CHECKING:
    from core.pager.recursion_guard import RenderContext


class EntityViewRepository(ABC):
    """Contract for the host's entity storage and view builder.

    Implementations wrap whatever system owns the entities. Formatters
    depend on this interface, not the implementation.
    """

    @abstractmethod
    def load(self, *, entity_type: str, entity_id: str) -> ContentEntity | None:
        """Load the default revision of an entity.

        Returns:
            The entity, or None if it does not exist or the viewer may not
            access it
        """

    @abstractmethod
    def load_revision(
        self,
        *,
        entity_type: str,
        revision_id: str,
    ) -> ContentEntity | None:
        """Load a specific revision of an entity.

        Returns:
            The revision, or None if it does not exist or the viewer may not
            access it
        """

    @abstractmethod
    def render(
        self,
        entity: ContentEntity,
        *,
        view_mode: str,
        langcode: str,
        render_context: "RenderContext",
    ) -> Any:
        """Render one entity in a view mode.

        ``render_context`` must be passed on to any paginated formatter the
        entity's own fields use, so nested rendering shares one depth counter.

        Returns:
            Render element / markup for the entity
        """
