import pytest
from pydantic import ValidationError

from core.models.config import PagerConfig, load_pager_config, merge_settings
from core.utils.constants import DEFAULT_PAGER_SETTINGS


class TestMergeSettings:
    def test_defaults_when_no_overrides(self) -> None:
        assert merge_settings() == DEFAULT_PAGER_SETTINGS
        assert merge_settings(None) == DEFAULT_PAGER_SETTINGS

    def test_overrides_win_over_defaults(self, custom_settings) -> None:
        merged = merge_settings(custom_settings)

        assert merged["pageIndexName"] == "section"
        assert merged["navigateByNumbers"] is False
        assert merged["maxPagesToShow"] == 3
        assert merged["navigateFirstLast"] is True

    def test_field_names_are_normalized(self) -> None:
        merged = merge_settings({"index_parameter_name": "chunk", "show_numbered": False})

        assert merged["pageIndexName"] == "chunk"
        assert merged["navigateByNumbers"] is False
        assert "index_parameter_name" not in merged

    def test_legacy_index_key_is_normalized(self) -> None:
        merged = merge_settings({"indexParameterName": "p"})

        assert merged["pageIndexName"] == "p"
        assert "indexParameterName" not in merged

    def test_does_not_mutate_defaults(self) -> None:
        merge_settings({"pageIndexName": "other"})

        assert DEFAULT_PAGER_SETTINGS["pageIndexName"] == "page"


class TestPagerConfig:
    def test_defaults(self) -> None:
        config = PagerConfig()

        assert config.index_parameter_name == "page"
        assert config.show_prev_next is True
        assert config.show_first_last is True
        assert config.show_numbered is True
        assert config.max_pages_to_show == 5
        assert config.show_page_summary is False
        assert config.not_found_policy == "raise"
        assert config.recursion_policy == "raise"
        assert config.view_mode == "default"

    def test_load_from_settings_keys(self, custom_settings) -> None:
        config = load_pager_config(custom_settings)

        assert config.index_parameter_name == "section"
        assert config.show_numbered is False
        assert config.max_pages_to_show == 3
        assert config.show_page_summary is True

    def test_negative_max_pages_is_clamped(self) -> None:
        assert PagerConfig(maxPagesToShow=-4).max_pages_to_show == 0

    @pytest.mark.parametrize("name", ["", "   ", "my page", "1page", "page&x"])
    def test_rejects_unsafe_index_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            PagerConfig(pageIndexName=name)

    @pytest.mark.parametrize("name", ["page", "section_2", "_p", "step-index"])
    def test_accepts_identifier_safe_names(self, name: str) -> None:
        assert PagerConfig(pageIndexName=name).index_parameter_name == name

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValidationError):
            PagerConfig(notFoundPolicy="ignore")

    def test_is_immutable(self) -> None:
        config = PagerConfig()

        with pytest.raises(ValidationError):
            config.show_numbered = False

    def test_to_settings_uses_settings_keys(self) -> None:
        settings = PagerConfig(showPageSummary=True).to_settings()

        assert settings == {
            "pageIndexName": "page",
            "navigatePreviousNext": True,
            "navigateFirstLast": True,
            "navigateByNumbers": True,
            "maxPagesToShow": 5,
            "showPageSummary": True,
            "notFoundPolicy": "raise",
            "recursionPolicy": "raise",
            "view_mode": "default",
        }

    def test_ignores_unrelated_formatter_settings(self) -> None:
        config = load_pager_config({"link": True, "pageIndexName": "p"})

        assert config.index_parameter_name == "p"
