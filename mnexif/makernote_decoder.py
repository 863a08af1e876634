# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
MakerNote value decoder

Entry points turning (group, tag ID, value) triples, as extracted by an
IFD parser, into human-readable text.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union

from mnexif.composite import CompositeAssembler, assemble_labeled, resolve_sub_tags
from mnexif.i18n import Translator, null_translator
from mnexif.makernote_tags import lookup, resolve_group
from mnexif.print_functions import PrintKind, print_rule
from mnexif.tag_info import GroupId, TagDescriptor
from mnexif.value_types import Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSettings:
    """
    Configuration for printing MakerNote values.

    Attributes:
        translate: Translator for labels and enumerated values
        composite_assembler: Joins the printed components of a composite tag
        expand_composites: decode_entries() also emits one key per component
        unknown_key_format: Name used for unknown tags in decode_entries()
    """
    translate: Translator = null_translator
    composite_assembler: CompositeAssembler = field(default_factory=assemble_labeled)
    expand_composites: bool = False
    unknown_key_format: str = "0x{:04x}"


DEFAULT_SETTINGS = RenderSettings()


def render(
    group: Union[GroupId, str],
    tag_id: int,
    value: Value,
    translate: Optional[Translator] = None,
    settings: Optional[RenderSettings] = None
) -> str:
    """
    Print a MakerNote tag value.

    Args:
        group: Tag group of the IFD the entry came from
        tag_id: Tag ID
        value: Decoded tag value
        translate: Translator (overrides settings.translate)
        settings: Render settings (defaults if None)

    Returns:
        Human-readable text. Unknown tags and values whose type or count
        do not fit the tag are printed with the value's default print.
    """
    settings = settings or DEFAULT_SETTINGS
    descriptor = lookup(group, tag_id)
    return print_rule(
        descriptor.formatter,
        value,
        translate or settings.translate,
        settings.composite_assembler,
    )


class MakerNoteDecoder:
    """
    Prints MakerNote entries with a fixed configuration.

    Stateless apart from its settings; one instance can be shared
    between threads.
    """

    def __init__(self, settings: Optional[RenderSettings] = None):
        """
        Initialize MakerNote decoder.

        Args:
            settings: Render settings (defaults if None)
        """
        self.settings = settings or DEFAULT_SETTINGS

    def render(self, group: Union[GroupId, str], tag_id: int, value: Value) -> str:
        return render(group, tag_id, value, settings=self.settings)

    def label(self, descriptor: TagDescriptor) -> str:
        return self.settings.translate(descriptor.label)

    def description(self, descriptor: TagDescriptor) -> str:
        return self.settings.translate(descriptor.description)

    def tag_key(self, group: Union[GroupId, str], tag_id: int) -> str:
        """
        Key for a tag in decoded output, e.g. 'Samsung2:LensType'.

        Unknown tags are keyed by their hex ID, e.g. 'Samsung2:0x1234'.
        """
        group_id = resolve_group(group)
        descriptor = lookup(group_id, tag_id)
        if descriptor.is_unknown:
            return f"{group_id.value}:{self.settings.unknown_key_format.format(tag_id)}"
        return descriptor.key

    def decode_entries(
        self,
        group: Union[GroupId, str],
        entries: Iterable[Tuple[int, Value]]
    ) -> Dict[str, str]:
        """
        Decode the entries of one MakerNote IFD.

        Args:
            group: Tag group of the IFD
            entries: (tag ID, value) pairs in IFD order

        Returns:
            Dictionary mapping tag keys to printed values. With
            expand_composites, every component of a composite tag is added
            under its own key (e.g. 'SamsungPictureWizard:Mode').
        """
        group_id = resolve_group(group)
        result: Dict[str, str] = {}
        for tag_id, value in entries:
            key = self.tag_key(group_id, tag_id)
            if key in result:
                logger.debug("Duplicate MakerNote entry %s, keeping the first", key)
                continue
            result[key] = self.render(group_id, tag_id, value)

            descriptor = lookup(group_id, tag_id)
            if self.settings.expand_composites and descriptor.formatter.kind is PrintKind.COMPOSITE:
                components = resolve_sub_tags(
                    value,
                    descriptor.formatter.sub_group,
                    self.settings.translate,
                    self.settings.composite_assembler,
                )
                for sub_descriptor, text in components:
                    result.setdefault(sub_descriptor.key, text)
        return result


def decode_samsung2(
    entries: Iterable[Tuple[int, Value]],
    settings: Optional[RenderSettings] = None
) -> Dict[str, str]:
    """Decode the entries of a Samsung type 2 MakerNote IFD."""
    return MakerNoteDecoder(settings).decode_entries(GroupId.SAMSUNG2, entries)
