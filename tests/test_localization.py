"""Tests for locale text selection."""

import pytest
from portalnav.core.items import NavigationItem
from portalnav.core.localization import get_localized_text


class TestGetLocalizedText:
    """Tests for get_localized_text()."""

    def test__requested_locale(self) -> None:
        assert get_localized_text({"en": "Home", "ne": "गृह"}, "ne") == "गृह"

    def test__falls_back_to_default_locale(self) -> None:
        assert get_localized_text({"en": "Home"}, "ne") == "Home"

    def test__falls_back_to_any_value(self) -> None:
        """Use whatever translation exists when neither locale is present."""
        assert get_localized_text({"hi": "मुखपृष्ठ"}, "ne") == "मुखपृष्ठ"

    def test__skips_empty_values(self) -> None:
        assert get_localized_text({"ne": "", "en": "Home"}, "ne") == "Home"

    @pytest.mark.parametrize("entity", [None, "Home", 42, {}])
    def test__unusable_entity__returns_empty(self, entity: object) -> None:
        assert get_localized_text(entity, "en") == ""

    def test__custom_default_locale(self) -> None:
        entity = {"en": "Home", "ne": "गृह"}

        assert get_localized_text(entity, "fr", default_locale="ne") == "गृह"


class TestNavigationItemToDict:
    """Tests for NavigationItem.to_dict()."""

    def test__serializes_with_wire_names(self) -> None:
        """Use camelCase keys and omit absent optional fields."""
        item = NavigationItem(id="news", title={"en": "News"}, href="/news", order=3)

        assert item.to_dict() == {
            "id": "news",
            "title": {"en": "News"},
            "href": "/news",
            "order": 3,
            "isActive": True,
            "external": False,
        }

    def test__includes_label_and_submenu(self) -> None:
        """Add a localized label and recurse into the submenu."""
        item = NavigationItem(
            id="gallery",
            title={"en": "Gallery", "ne": "ग्यालेरी"},
            href="/gallery",
            description={"en": "Photos and videos"},
            submenu=[NavigationItem(id="photos", title={"en": "Photos"}, href="/gallery/photos")],
        )

        data = item.to_dict("ne")

        assert data["label"] == "ग्यालेरी"
        assert data["description"] == {"en": "Photos and videos"}
        assert data["submenu"][0]["id"] == "photos"
        assert data["submenu"][0]["label"] == "Photos"
