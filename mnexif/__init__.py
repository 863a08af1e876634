# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
mnexif - Pure Python MakerNote value printing

Turns vendor MakerNote entries, already extracted from an image's IFDs,
into human-readable text. Tag tables map each tag ID to a descriptor and a
formatting rule; composite tags are decoded through a secondary tag table.
Printing never fails: unknown tags and malformed values fall back to the
value's default representation.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from mnexif.exceptions import MnExifError, RegistryError, UnknownGroupError, InvalidValueError
from mnexif.value_types import TypeId, Value
from mnexif.i18n import CatalogTranslator, GettextTranslator, null_translator
from mnexif.tag_info import GroupId, SectionId, TagDescriptor, TagDetails, TagRegistry, UNKNOWN_TAG_ID
from mnexif.print_functions import FormattingRule, PrintKind, print_rule
from mnexif.makernote_tags import get_registry, lookup, tag_list
from mnexif.composite import (
    resolve_sub,
    assemble_labeled,
    assemble_values,
    assemble_first,
)
from mnexif.makernote_decoder import (
    RenderSettings,
    MakerNoteDecoder,
    render,
    decode_samsung2,
)
from mnexif.tag_lister import list_tags, get_tag_info, format_tag_list

__all__ = [
    "MnExifError",
    "RegistryError",
    "UnknownGroupError",
    "InvalidValueError",
    "TypeId",
    "Value",
    "CatalogTranslator",
    "GettextTranslator",
    "null_translator",
    "GroupId",
    "SectionId",
    "TagDescriptor",
    "TagDetails",
    "TagRegistry",
    "UNKNOWN_TAG_ID",
    "FormattingRule",
    "PrintKind",
    "print_rule",
    "get_registry",
    "lookup",
    "tag_list",
    "resolve_sub",
    "assemble_labeled",
    "assemble_values",
    "assemble_first",
    "RenderSettings",
    "MakerNoteDecoder",
    "render",
    "decode_samsung2",
    "list_tags",
    "get_tag_info",
    "format_tag_list",
]
