# tests/test_localization.py
"""
Field localization and UI labels.

Covers:
  - French reads the unsuffixed column verbatim
  - Other languages read `<field>_<lang>` and fall back to French when empty
  - Missing fields resolve to "" for ORM-like objects, models and mappings
  - parse_language() maps unknown input onto French
  - Translator falls back to French, then to the key itself
"""
from types import SimpleNamespace

import pytest

from menupub.core.constants import Language, parse_language
from menupub.schemas.menu import CategoryRead
from menupub.services.i18n import TRANSLATIONS, Translator
from menupub.services.menu import localized_attr, resolve_field


DISH = {
    "title": "Soupe à l'oignon",
    "title_en": "Onion soup",
    "title_it": "",
    "title_es": None,
    "description": "Gratinée",
}


# ── resolve_field ──────────────────────────────────

class TestResolveField:

    def test_french_reads_base_column(self):
        assert resolve_field(DISH, "title", Language.fr) == "Soupe à l'oignon"

    def test_french_ignores_suffixed_column(self):
        record = {"title": "Soupe", "title_fr": "Ignored"}
        assert resolve_field(record, "title", "fr") == "Soupe"

    def test_translation_used_when_present(self):
        assert resolve_field(DISH, "title", Language.en) == "Onion soup"

    @pytest.mark.parametrize("lang", ["it", "es"])
    def test_empty_translation_falls_back_to_french(self, lang):
        assert resolve_field(DISH, "title", lang) == "Soupe à l'oignon"

    def test_missing_field_is_empty_string(self):
        assert resolve_field(DISH, "text", Language.en) == ""
        assert resolve_field({}, "title", Language.fr) == ""
        assert resolve_field(None, "title", Language.it) == ""

    def test_unknown_field_uses_base_value(self):
        record = {"name": "Bistrot", "name_en": "Bistro"}
        assert resolve_field(record, "name", "en") == "Bistrot"

    def test_works_on_objects(self):
        row = SimpleNamespace(title="Dessert", title_it="Dolce")
        assert resolve_field(row, "title", "it") == "Dolce"
        assert resolve_field(row, "title", "es") == "Dessert"

    def test_works_on_pydantic_models(self):
        category = CategoryRead(id=1, title="Boissons", title_es="Bebidas")
        assert resolve_field(category, "title", Language.es) == "Bebidas"
        assert resolve_field(category, "title", Language.en) == "Boissons"

    def test_unknown_language_treated_as_french(self):
        assert resolve_field(DISH, "title", "de") == "Soupe à l'oignon"

    def test_localized_attr_table(self):
        assert localized_attr("description", "en") == "description_en"
        assert localized_attr("title", "fr") is None
        assert localized_attr("price", "en") is None


# ── parse_language ─────────────────────────────────

class TestParseLanguage:

    @pytest.mark.parametrize("raw,expected", [
        ("en", Language.en),
        (" IT ", Language.it),
        ("es", Language.es),
        (Language.fr, Language.fr),
        ("de", Language.fr),
        ("", Language.fr),
        (None, Language.fr),
    ])
    def test_parse(self, raw, expected):
        assert parse_language(raw) is expected


# ── Translator ─────────────────────────────────────

class TestTranslator:

    def test_requested_language(self):
        assert Translator("en").t("menu.specials") == "Our specials"

    def test_french_default(self):
        assert Translator().t("menu.supplements") == "Suppléments"

    def test_missing_key_falls_back_to_french(self, monkeypatch):
        monkeypatch.delitem(TRANSLATIONS[Language.es]["menu"], "empty")
        assert Translator("es").t("menu.empty") == "Le menu sera bientôt disponible"

    def test_every_language_has_every_label(self):
        french_keys = set(TRANSLATIONS[Language.fr]["menu"])
        for language in Language:
            assert set(TRANSLATIONS[language]["menu"]) == french_keys, language

    def test_spanish_empty_label(self):
        assert Translator("es").t("menu.empty") == "El menú estará disponible pronto"

    def test_unknown_key_returns_key(self):
        assert Translator("en").t("menu.nope") == "menu.nope"
