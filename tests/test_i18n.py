from mnexif.i18n import N_, CatalogTranslator, GettextTranslator, null_translator


def test_null_translator_is_identity():
    assert null_translator("Neutral") == "Neutral"


def test_marker_returns_text_untranslated():
    assert N_("Unknown") == "Unknown"


def test_catalog_translator_falls_back_to_input():
    translate = CatalogTranslator({"Neutral": "Neutre"})
    assert translate("Neutral") == "Neutre"
    assert translate("Vivid") == "Vivid"


def test_gettext_translator_without_catalog_returns_input(tmp_path):
    translate = GettextTranslator(localedir=str(tmp_path), languages=["fr"])
    assert translate("Unknown") == "Unknown"
