"""
Business logic for rendering a paginated text field.
"""

from aws_lambda_powertools import Logger

from core.models.field import TextItem
from core.models.pagination import PagerView
from core.services.formatter_settings import FormatterSettingsService
from core.utils.request import QueryUrlBuilder, RequestParams
from core.utils.translation import CatalogTranslator
from formatters.text import view_text_field

logger = Logger(UTC=True)


class RenderTextFieldService:
    """Application service rendering one page of a text field.

    This service coordinates:
    - Resolving the field's effective pager configuration
    - Running the text formatter against the request's page index
    """

    def __init__(self, settings: FormatterSettingsService | None = None) -> None:
        self.settings = settings or FormatterSettingsService()

    def render(
        self,
        *,
        field_id: str,
        items: list[TextItem],
        request: RequestParams,
        url_builder: QueryUrlBuilder,
        langcode: str = "en",
    ) -> PagerView:
        """
        Render the page selected by the request.

        Raises:
            IndexOutOfRangeError: If the requested page does not exist
            SettingsStoreError: If the field's settings cannot be read
        """
        config = self.settings.get_config(field_id)

        view = view_text_field(
            items,
            config=config,
            request=request,
            url_builder=url_builder,
            translator=CatalogTranslator(langcode=langcode),
        )

        logger.info(
            "Text field rendered",
            extra={
                "field_id": field_id,
                "total_items": view.total_items,
                "resolved_index": view.resolved_index,
                "links": len(view.navigation_links),
            },
        )

        return view
