"""String translation used for pager labels and settings text."""

from collections.abc import Mapping
from typing import Any, Protocol


class Translator(Protocol):
    """Looks up a source string in the active locale and fills placeholders."""

    def translate(self, text: str, **args: Any) -> str: ...


class CatalogTranslator:
    """Dictionary-backed translator.

    Source strings missing from the catalog are returned untranslated.
    Placeholders use the ``@name`` form, e.g. ``"Page @current of @total"``.
    """

    def __init__(
        self,
        catalog: Mapping[str, str] | None = None,
        *,
        langcode: str = "en",
    ) -> None:
        self.catalog: dict[str, str] = dict(catalog or {})
        self.langcode = langcode

    def translate(self, text: str, **args: Any) -> str:
        translated = self.catalog.get(text, text)

        # Longest names first so "@max" never clobbers "@max_pages".
        for name in sorted(args, key=len, reverse=True):
            translated = translated.replace(f"@{name}", str(args[name]))

        return translated


DEFAULT_TRANSLATOR = CatalogTranslator()
