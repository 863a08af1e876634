import pytest

from mnexif.exceptions import RegistryError, UnknownGroupError
from mnexif.makernote_tags import get_makernote_tag_name, get_registry, lookup, resolve_group, tag_list
from mnexif.print_functions import PRINT_VALUE, FormattingRule, PrintKind
from mnexif.samsung_tags import SAMSUNG2_TAGS, SAMSUNG_PW_TAGS
from mnexif.tag_info import (
    ANY_COUNT,
    UNKNOWN_TAG_ID,
    GroupId,
    SectionId,
    TagDescriptor,
    TagDetails,
    TagRegistry,
)
from mnexif.value_types import TypeId


def _descriptor(tag_id, name, group=GroupId.SAMSUNG2):
    return TagDescriptor(tag_id, name, name, name, group, SectionId.MAKER_TAGS,
                         TypeId.SHORT, ANY_COUNT, PRINT_VALUE)


@pytest.mark.parametrize("group, unknown_name", [
    (GroupId.SAMSUNG2, "(UnknownSamsung2MakerNoteTag)"),
    (GroupId.SAMSUNG_PW, "(UnknownSamsungPictureWizardTag)"),
])
def test_every_unlisted_id_resolves_to_the_sentinel(group, unknown_name):
    registry = get_registry(group)
    for tag_id in range(0x10000):
        descriptor = lookup(group, tag_id)
        if tag_id in registry:
            assert descriptor.id == tag_id
        else:
            assert descriptor is registry.unknown
            assert descriptor.name == unknown_name


def test_known_tags_resolve_by_id():
    assert lookup(GroupId.SAMSUNG2, 0xa003).name == "LensType"
    assert lookup(GroupId.SAMSUNG2, 0x0043).name == "CameraTemperature"
    assert lookup(GroupId.SAMSUNG_PW, 0x0001).name == "Color"
    assert get_makernote_tag_name("Samsung2", 0xa01a) == "FocalLengthIn35mmFormat"


def test_tag_list_keeps_declaration_order_with_sentinel_last():
    descriptors = tag_list(GroupId.SAMSUNG2)
    assert descriptors[:-1] == list(SAMSUNG2_TAGS)
    assert descriptors[-1].id == UNKNOWN_TAG_ID
    assert [d.id for d in descriptors].count(UNKNOWN_TAG_ID) == 1


def test_picture_wizard_sub_tag_ids_are_ascending_from_zero():
    assert get_registry(GroupId.SAMSUNG_PW).sub_tag_ids() == [0, 1, 2, 3, 4]
    assert [d.name for d in SAMSUNG_PW_TAGS] == ["Mode", "Color", "Saturation", "Sharpness", "Contrast"]


def test_lookup_by_name():
    registry = get_registry(GroupId.SAMSUNG2)
    assert registry.lookup_name("FNumber").id == 0xa019
    assert registry.lookup_name("NoSuchTag").is_unknown


def test_descriptor_key_is_group_qualified():
    assert lookup(GroupId.SAMSUNG_PW, 0).key == "SamsungPictureWizard:Mode"


def test_group_names_resolve():
    assert resolve_group("Samsung2") is GroupId.SAMSUNG2
    assert resolve_group("SAMSUNG_PW") is GroupId.SAMSUNG_PW
    with pytest.raises(UnknownGroupError):
        resolve_group("Canon")
    with pytest.raises(UnknownGroupError):
        lookup(42, 1)


def test_registry_rejects_duplicate_ids():
    unknown = _descriptor(UNKNOWN_TAG_ID, "(Unknown)")
    with pytest.raises(RegistryError):
        TagRegistry(GroupId.SAMSUNG2, [_descriptor(1, "A"), _descriptor(1, "B")], unknown)


def test_registry_rejects_reserved_id_in_regular_descriptors():
    unknown = _descriptor(UNKNOWN_TAG_ID, "(Unknown)")
    with pytest.raises(RegistryError):
        TagRegistry(GroupId.SAMSUNG2, [_descriptor(UNKNOWN_TAG_ID, "A")], unknown)


def test_registry_requires_sentinel_id_and_group():
    with pytest.raises(RegistryError):
        TagRegistry(GroupId.SAMSUNG2, [], _descriptor(1, "(Unknown)"))
    with pytest.raises(RegistryError):
        TagRegistry(GroupId.SAMSUNG2, [], _descriptor(UNKNOWN_TAG_ID, "(Unknown)", GroupId.SAMSUNG_PW))


def test_registry_rejects_foreign_descriptors():
    unknown = _descriptor(UNKNOWN_TAG_ID, "(Unknown)")
    with pytest.raises(RegistryError):
        TagRegistry(GroupId.SAMSUNG2, [_descriptor(1, "A", GroupId.SAMSUNG_PW)], unknown)


def test_lookup_table_rejects_duplicate_values():
    with pytest.raises(RegistryError):
        TagDetails([(0, "Off"), (0, "On")])


def test_lookup_table_exact_match():
    details = TagDetails([(0, "Off"), (1, "On")])
    assert details.find(1) == "On"
    assert details.find(2) is None
    assert list(details) == [(0, "Off"), (1, "On")]


def test_rules_require_their_parameters():
    with pytest.raises(RegistryError):
        FormattingRule(PrintKind.TAG)
    with pytest.raises(RegistryError):
        FormattingRule(PrintKind.COMPOSITE)
