import pytest

from mnexif.exceptions import UnknownGroupError
from mnexif.i18n import CatalogTranslator
from mnexif.makernote_decoder import MakerNoteDecoder, RenderSettings, decode_samsung2, render
from mnexif.makernote_tags import lookup
from mnexif.tag_info import GroupId
from mnexif.value_types import TypeId, Value

ENTRIES = [
    (0x0001, Value(TypeId.UNDEFINED, b"0100")),
    (0x0021, Value(TypeId.SHORT, [0, 65535, 4, 4, 4])),
    (0x0043, Value(TypeId.SRATIONAL, (25, 1))),
    (0xa003, Value.scalar(TypeId.SHORT, 1)),
    (0xa01a, Value.scalar(TypeId.LONG, 500)),
    (0x1234, Value.scalar(TypeId.SHORT, 7)),
]


def test_decode_samsung2_keys_by_group_and_name():
    decoded = decode_samsung2(ENTRIES)
    assert decoded == {
        "Samsung2:Version": "1.00",
        "Samsung2:PictureWizard": "Mode: Standard, Color: Neutral, Saturation: 0, Sharpness: 0, Contrast: 0",
        "Samsung2:CameraTemperature": "25 C",
        "Samsung2:LensType": "Samsung NX 30mm F2 Pancake",
        "Samsung2:FocalLengthIn35mmFormat": "50.0 mm",
        "Samsung2:0x1234": "7",
    }


def test_composites_can_be_expanded():
    decoder = MakerNoteDecoder(RenderSettings(expand_composites=True))
    decoded = decoder.decode_entries("Samsung2", ENTRIES[1:2])
    assert decoded["SamsungPictureWizard:Mode"] == "Standard"
    assert decoded["SamsungPictureWizard:Color"] == "Neutral"
    assert decoded["SamsungPictureWizard:Contrast"] == "0"
    assert len(decoded) == 6


def test_duplicate_entries_keep_the_first():
    decoded = decode_samsung2([
        (0xa011, Value.scalar(TypeId.SHORT, 0)),
        (0xa011, Value.scalar(TypeId.SHORT, 1)),
    ])
    assert decoded == {"Samsung2:ColorSpace": "sRGB"}


def test_unknown_key_format_is_configurable():
    decoder = MakerNoteDecoder(RenderSettings(unknown_key_format="Tag{:04X}"))
    assert decoder.tag_key(GroupId.SAMSUNG2, 0xbeef) == "Samsung2:TagBEEF"


def test_decoder_translates_labels_and_descriptions():
    decoder = MakerNoteDecoder(RenderSettings(translate=CatalogTranslator({
        "Lens Type": "Objektivtyp",
        "Lens type": "Typ des Objektivs",
        "Built-in": "Eingebaut",
    })))
    descriptor = lookup(GroupId.SAMSUNG2, 0xa003)
    assert decoder.label(descriptor) == "Objektivtyp"
    assert decoder.description(descriptor) == "Typ des Objektivs"
    assert decoder.render(GroupId.SAMSUNG2, 0xa003, Value.scalar(TypeId.SHORT, 0)) == "Eingebaut"


def test_explicit_translator_overrides_settings():
    settings = RenderSettings(translate=CatalogTranslator({"Neutral": "Neutre"}))
    value = Value.scalar(TypeId.SHORT, 65535)
    assert render(GroupId.SAMSUNG_PW, 1, value, settings=settings) == "Neutre"
    assert render(GroupId.SAMSUNG_PW, 1, value, translate=CatalogTranslator({}), settings=settings) == "Neutral"


def test_unknown_group_is_a_programming_error():
    with pytest.raises(UnknownGroupError):
        render("Canon", 1, Value.scalar(TypeId.SHORT, 1))
    with pytest.raises(UnknownGroupError):
        MakerNoteDecoder().decode_entries("Canon", [])


def test_expanding_an_unpackable_composite_keeps_default_print():
    decoder = MakerNoteDecoder(RenderSettings(expand_composites=True))
    decoded = decoder.decode_entries(GroupId.SAMSUNG2, [(0x0021, Value(TypeId.FLOAT, [1e39]))])
    assert decoded == {"Samsung2:PictureWizard": "1e+39"}


def test_tag_key_accepts_group_names():
    decoder = MakerNoteDecoder()
    assert decoder.tag_key("Samsung2", 0xa003) == "Samsung2:LensType"
    assert decoder.tag_key("SamsungPictureWizard", 0x0042) == "SamsungPictureWizard:0x0042"
