import struct

from mnexif.composite import (
    assemble_first,
    assemble_labeled,
    assemble_values,
    resolve_sub,
    split_components,
)
from mnexif.i18n import CatalogTranslator
from mnexif.makernote_decoder import RenderSettings, render
from mnexif.tag_info import GroupId
from mnexif.value_types import TypeId, Value

PW = GroupId.SAMSUNG_PW


def test_full_payload_resolves_every_sub_tag():
    parent = Value(TypeId.SHORT, [1, 65535, 4, 0, 9])
    assert resolve_sub(parent, PW) == [
        (0, "Vivid"),
        (1, "Neutral"),
        (2, "0"),
        (3, "-4"),
        (4, "5"),
    ]


def test_truncated_payload_resolves_available_prefix():
    parent = Value(TypeId.SHORT, [2, 180])
    assert resolve_sub(parent, PW) == [(0, "Portrait"), (1, "180")]


def test_empty_payload_resolves_nothing():
    assert resolve_sub(Value(TypeId.SHORT, []), PW) == []


def test_extra_components_are_ignored():
    parent = Value(TypeId.SHORT, [0, 0, 4, 4, 4, 7])
    assert [sub_id for sub_id, _ in resolve_sub(parent, PW)] == [0, 1, 2, 3, 4]


def test_components_keep_sub_tag_type():
    parts = split_components(Value(TypeId.SHORT, [3, 90]), PW)
    assert [(d.name, v) for d, v in parts] == [
        ("Mode", Value.scalar(TypeId.SHORT, 3)),
        ("Color", Value.scalar(TypeId.SHORT, 90)),
    ]


def test_raw_bytes_are_reinterpreted_little_endian():
    parent = Value(TypeId.UNDEFINED, struct.pack("<5H", 3, 180, 5, 4, 3))
    assert resolve_sub(parent, PW) == [
        (0, "Landscape"),
        (1, "180"),
        (2, "1"),
        (3, "0"),
        (4, "-1"),
    ]


def test_raw_bytes_are_reinterpreted_big_endian():
    parent = Value(TypeId.UNDEFINED, struct.pack(">3H", 8, 65535, 6), ">")
    assert resolve_sub(parent, PW) == [(0, "Classic"), (1, "Neutral"), (2, "2")]


def test_partial_trailing_component_is_not_fabricated():
    parent = Value(TypeId.UNDEFINED, struct.pack("<2H", 0, 1) + b"\x04")
    assert resolve_sub(parent, PW) == [(0, "Standard"), (1, "1")]


def test_composite_tag_renders_labeled_components():
    value = Value(TypeId.SHORT, [1, 65535, 4, 4, 4])
    assert render(GroupId.SAMSUNG2, 0x0021, value) == (
        "Mode: Vivid, Color: Neutral, Saturation: 0, Sharpness: 0, Contrast: 0"
    )


def test_composite_tag_renders_truncated_payload():
    value = Value(TypeId.SHORT, [9])
    assert render(GroupId.SAMSUNG2, 0x0021, value) == "Mode: Custom1"


def test_composite_tag_with_empty_payload_uses_default_print():
    assert render(GroupId.SAMSUNG2, 0x0021, Value(TypeId.SHORT, [])) == ""


def test_assembly_is_configurable():
    value = Value(TypeId.SHORT, [1, 65535, 4, 4, 4])
    values_only = RenderSettings(composite_assembler=assemble_values())
    mode_only = RenderSettings(composite_assembler=assemble_first)
    custom = RenderSettings(composite_assembler=assemble_labeled(separator="; ", label_separator="="))

    assert render(GroupId.SAMSUNG2, 0x0021, value, settings=values_only) == "Vivid Neutral 0 0 0"
    assert render(GroupId.SAMSUNG2, 0x0021, value, settings=mode_only) == "Vivid"
    assert render(GroupId.SAMSUNG2, 0x0021, value, settings=custom) == (
        "Mode=Vivid; Color=Neutral; Saturation=0; Sharpness=0; Contrast=0"
    )


def test_composite_labels_and_values_are_translated():
    translate = CatalogTranslator({"Mode": "Modus", "Vivid": "Lebhaft", "Color": "Farbe"})
    value = Value(TypeId.SHORT, [1, 30])
    assert render(GroupId.SAMSUNG2, 0x0021, value, translate=translate) == "Modus: Lebhaft, Farbe: 30"


def test_unpackable_parent_resolves_nothing():
    # 1e39 does not fit a 4-byte float, so there are no raw bytes to split
    assert resolve_sub(Value(TypeId.FLOAT, [1e39]), PW) == []
    assert render(GroupId.SAMSUNG2, 0x0021, Value(TypeId.FLOAT, [1e39])) == "1e+39"
