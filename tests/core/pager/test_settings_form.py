import pytest

from core.models.config import PagerConfig
from core.models.errors import InvalidConfigurationError
from core.pager.settings_form import (
    describe_settings_form,
    summarize_settings,
    validate_settings,
)
from core.utils.translation import CatalogTranslator


class TestDescribeSettingsForm:
    def test_elements_carry_current_values(self, custom_settings) -> None:
        config = validate_settings(custom_settings)

        form = describe_settings_form(config)

        assert form["pageIndexName"]["default_value"] == "section"
        assert form["pageIndexName"]["required"] is True
        assert form["navigateByNumbers"]["default_value"] is False
        assert form["maxPagesToShow"]["default_value"] == 3
        assert form["showPageSummary"]["type"] == "checkbox"

    def test_max_pages_only_visible_with_numbers(self, default_config: PagerConfig) -> None:
        form = describe_settings_form(default_config)

        assert form["maxPagesToShow"]["states"] == {
            "visible": {"navigateByNumbers": {"checked": True}},
        }

    def test_every_setting_has_an_element(self, default_config: PagerConfig) -> None:
        form = describe_settings_form(default_config)

        assert set(form) == set(default_config.to_settings())

    def test_policy_and_view_mode_elements(self) -> None:
        config = PagerConfig(recursionPolicy="skip", view_mode="teaser")

        form = describe_settings_form(config)

        assert form["recursionPolicy"]["type"] == "select"
        assert set(form["recursionPolicy"]["options"]) == {"raise", "skip"}
        assert form["recursionPolicy"]["default_value"] == "skip"
        assert form["view_mode"]["default_value"] == "teaser"
        assert form["view_mode"]["required"] is True

    def test_titles_are_translated(self, default_config: PagerConfig) -> None:
        translator = CatalogTranslator(
            {"Display First & Last": "Afficher Premier & Dernier"},
            langcode="fr",
        )

        form = describe_settings_form(default_config, translator)

        assert form["navigateFirstLast"]["title"] == "Afficher Premier & Dernier"
        assert form["navigatePreviousNext"]["title"] == "Display Previous & Next"


class TestSummarizeSettings:
    def test_default_summary(self, default_config: PagerConfig) -> None:
        assert summarize_settings(default_config) == [
            "Pagination settings (Max pages: 5)",
            "Index parameter: page",
            "Navigation: First & Last, Previous & Next, Page numbers",
        ]

    def test_summary_without_controls(self) -> None:
        config = PagerConfig(
            navigateFirstLast=False,
            navigatePreviousNext=False,
            navigateByNumbers=False,
            showPageSummary=True,
        )

        summary = summarize_settings(config)

        assert "Navigation: none" in summary
        assert summary[-1] == "Page summary shown"


class TestValidateSettings:
    def test_valid_settings(self, custom_settings) -> None:
        config = validate_settings(custom_settings)

        assert config.index_parameter_name == "section"

    def test_none_gives_defaults(self) -> None:
        assert validate_settings(None) == PagerConfig()

    def test_empty_index_name_is_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            validate_settings({"pageIndexName": ""})

        err = exc_info.value
        assert err.error_code == "INVALID_CONFIGURATION"
        assert [e["field"] for e in err.details["errors"]] == ["pageIndexName"]

    def test_every_bad_field_is_reported(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            validate_settings({"pageIndexName": "a b", "maxPagesToShow": "many"})

        fields = {e["field"] for e in exc_info.value.details["errors"]}
        assert fields == {"pageIndexName", "maxPagesToShow"}
