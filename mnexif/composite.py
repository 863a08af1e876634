# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Composite tag resolver

Some MakerNote tags pack several independent fields into one value (Samsung
PictureWizard 0x0021 holds Mode, Color, Saturation, Sharpness and Contrast).
The components are described by a secondary tag group: its known tag IDs,
in ascending order, map to consecutive components of the parent value.
Each component is printed through that group's own descriptors.

How the resolved components are joined into one string is left to a
CompositeAssembler; the assemblers below cover the common layouts.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from mnexif.i18n import Translator, null_translator
from mnexif.makernote_tags import get_registry
from mnexif.print_functions import print_rule
from mnexif.tag_info import GroupId, TagDescriptor
from mnexif.value_types import TYPE_SIZES, TypeId, Value

logger = logging.getLogger(__name__)

CompositeAssembler = Callable[[Sequence[Tuple[TagDescriptor, str]], Translator], str]


def _components(descriptor: TagDescriptor) -> int:
    return descriptor.count if descriptor.count > 0 else 1


def split_components(parent: Value, sub_group: GroupId) -> List[Tuple[TagDescriptor, Value]]:
    """
    Cut a composite value into one value per sub-tag.

    When the parent already has the sub-tag's type, components are taken
    as they are. Otherwise the parent's raw bytes are reinterpreted with the
    sub-tag's type, in the parent's byte order.

    Args:
        parent: Composite tag value
        sub_group: Group describing the components

    Returns:
        (descriptor, value) pairs for every sub-tag the payload covers;
        sub-tags past the end of a truncated payload are omitted
    """
    registry = get_registry(sub_group)
    parts: List[Tuple[TagDescriptor, Value]] = []
    raw: Optional[bytes] = None
    element_offset = 0
    byte_offset = 0

    for sub_id in registry.sub_tag_ids():
        descriptor = registry.lookup(sub_id)
        width = _components(descriptor)

        if parent.type_id == descriptor.type_id and parent.type_id != TypeId.ASCII:
            if element_offset + width > parent.count():
                break
            elements = parent.elements[element_offset:element_offset + width]
            parts.append((descriptor, Value(descriptor.type_id, list(elements), parent.byte_order)))
        else:
            if raw is None:
                raw = parent.to_bytes()
            size = TYPE_SIZES[descriptor.type_id] * width
            if byte_offset + size > len(raw):
                break
            chunk = raw[byte_offset:byte_offset + size]
            parts.append((descriptor, Value.from_bytes(descriptor.type_id, chunk, parent.byte_order)))

        element_offset += width
        byte_offset += TYPE_SIZES[descriptor.type_id] * width

    if len(parts) < len(registry):
        logger.debug("Composite %s payload %r covers %d of %d sub-tags",
                     sub_group.value, parent, len(parts), len(registry))
    return parts


def resolve_sub_tags(
    parent: Value,
    sub_group: GroupId,
    translate: Optional[Translator] = None,
    assembler: Optional[CompositeAssembler] = None
) -> List[Tuple[TagDescriptor, str]]:
    """
    Print each component of a composite value.

    Args:
        parent: Composite tag value
        sub_group: Group describing the components
        translate: Translator for labels
        assembler: Assembler used if a component is itself composite

    Returns:
        (descriptor, text) pairs in component order
    """
    if translate is None:
        translate = null_translator
    return [
        (descriptor, print_rule(descriptor.formatter, value, translate, assembler))
        for descriptor, value in split_components(parent, sub_group)
    ]


def resolve_sub(
    parent: Value,
    sub_group: GroupId,
    translate: Optional[Translator] = None,
    assembler: Optional[CompositeAssembler] = None
) -> List[Tuple[int, str]]:
    """
    Print each component of a composite value.

    Returns:
        (sub-tag ID, text) pairs in component order
    """
    return [
        (descriptor.id, text)
        for descriptor, text in resolve_sub_tags(parent, sub_group, translate, assembler)
    ]


def assemble_labeled(separator: str = ", ", label_separator: str = ": ") -> CompositeAssembler:
    """
    Join components as "Label: text" entries.

    Example: "Mode: Vivid, Color: Neutral, Saturation: 0"
    """
    def assemble(resolved: Sequence[Tuple[TagDescriptor, str]], translate: Translator) -> str:
        return separator.join(
            f"{translate(descriptor.label)}{label_separator}{text}" for descriptor, text in resolved
        )
    return assemble


def assemble_values(separator: str = " ") -> CompositeAssembler:
    """Join component texts only, e.g. "Vivid Neutral 0 0 0"."""
    def assemble(resolved: Sequence[Tuple[TagDescriptor, str]], translate: Translator) -> str:
        return separator.join(text for _, text in resolved)
    return assemble


def assemble_first(resolved: Sequence[Tuple[TagDescriptor, str]], translate: Translator) -> str:
    """Print the first component only (e.g. PictureWizard Mode)."""
    return resolved[0][1] if resolved else ""
