# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
MakerNote tag registry lookup

Maps each tag group to its registry and exposes the lookup service used by
the printers: lookup(group, tag_id) always returns a descriptor, falling back
to the group's unknown-tag sentinel.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, List, Union

from mnexif.exceptions import UnknownGroupError
from mnexif.samsung_tags import SAMSUNG2_REGISTRY, SAMSUNG_PW_REGISTRY
from mnexif.tag_info import GroupId, TagDescriptor, TagRegistry

MAKERNOTE_REGISTRIES: Dict[GroupId, TagRegistry] = {
    GroupId.SAMSUNG2: SAMSUNG2_REGISTRY,
    GroupId.SAMSUNG_PW: SAMSUNG_PW_REGISTRY,
}


def resolve_group(group: Union[GroupId, str, Any]) -> GroupId:
    """
    Normalize a group argument.

    Args:
        group: GroupId, or a group prefix such as 'Samsung2' or an enum
               member name such as 'SAMSUNG_PW'

    Returns:
        The matching GroupId

    Raises:
        UnknownGroupError: If the argument does not name a known group
    """
    if isinstance(group, GroupId):
        return group
    if isinstance(group, str):
        for candidate in GroupId:
            if group in (candidate.value, candidate.name):
                return candidate
    raise UnknownGroupError(f"Unknown MakerNote tag group: {group!r}")


def get_registry(group: Union[GroupId, str]) -> TagRegistry:
    """Return the registry of a group."""
    return MAKERNOTE_REGISTRIES[resolve_group(group)]


def lookup(group: Union[GroupId, str], tag_id: int) -> TagDescriptor:
    """
    Find the descriptor of a tag.

    Args:
        group: Tag group
        tag_id: Tag ID (0..0xFFFF)

    Returns:
        Matching descriptor, or the group's unknown-tag sentinel
    """
    return get_registry(group).lookup(tag_id)


def tag_list(group: Union[GroupId, str]) -> List[TagDescriptor]:
    """All descriptors of a group in declaration order, sentinel last."""
    return get_registry(group).tag_list()


def get_makernote_tag_name(group: Union[GroupId, str], tag_id: int) -> str:
    """Symbolic name of a tag ID ('(Unknown...)' sentinel name on a miss)."""
    return lookup(group, tag_id).name
