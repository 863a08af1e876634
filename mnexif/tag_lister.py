# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag listing utilities

Lists the tags known for a MakerNote group, for schema dumps and for
checking coverage of unknown tags.

Copyright 2025 DNAi inc.
"""

import json
from typing import Any, Dict, List, Optional, Union

from mnexif.i18n import Translator, null_translator
from mnexif.makernote_tags import get_registry, tag_list
from mnexif.tag_info import GroupId, TagDescriptor

# Column order of text and CSV listings
LIST_COLUMNS = ('name', 'id', 'group', 'section', 'type', 'count', 'label', 'description')


def list_tags(group: Union[GroupId, str]) -> List[str]:
    """
    List the keys of all known tags of a group.

    Args:
        group: Tag group

    Returns:
        Keys such as 'Samsung2:LensType', in declaration order
    """
    return [descriptor.key for descriptor in get_registry(group)]


def _describe(descriptor: TagDescriptor, translate: Translator) -> Dict[str, Any]:
    return {
        'name': descriptor.name,
        'id': f"0x{descriptor.id:04x}",
        'group': descriptor.group.value,
        'section': descriptor.section.value,
        'type': descriptor.type_id.name,
        'count': descriptor.count,
        'label': translate(descriptor.label),
        'description': translate(descriptor.description),
    }


def get_tag_info(
    group: Union[GroupId, str],
    tag: Union[int, str],
    translate: Optional[Translator] = None
) -> Dict[str, Any]:
    """
    Get information about a specific tag.

    Args:
        group: Tag group
        tag: Tag ID or symbolic name
        translate: Translator for label and description

    Returns:
        Dictionary with tag information; 'exists' is False (and the
        group's unknown-tag entry is described) if the tag is not known
    """
    registry = get_registry(group)
    if isinstance(tag, str):
        descriptor = registry.lookup_name(tag)
    else:
        descriptor = registry.lookup(tag)
    info = _describe(descriptor, translate or null_translator)
    info['exists'] = not descriptor.is_unknown
    return info


def format_tag_list(
    group: Union[GroupId, str],
    format_type: str = "text",
    translate: Optional[Translator] = None,
    include_unknown: bool = False
) -> str:
    """
    Format the tag list of a group.

    Args:
        group: Tag group
        format_type: Output format ('text', 'json', 'csv')
        translate: Translator for labels and descriptions
        include_unknown: Append the unknown-tag entry as the last row

    Returns:
        Formatted listing
    """
    translate = translate or null_translator
    descriptors = tag_list(group)
    if not include_unknown:
        descriptors = [d for d in descriptors if not d.is_unknown]
    rows = [_describe(d, translate) for d in descriptors]

    if format_type == "json":
        return json.dumps(rows, indent=2, ensure_ascii=False)
    elif format_type == "csv":
        lines = [",".join(c.capitalize() for c in LIST_COLUMNS)]
        for row in rows:
            # Escape quotes in CSV
            cells = [str(row[c]).replace('"', '""') for c in LIST_COLUMNS]
            lines.append(",".join(f'"{cell}"' for cell in cells))
        return "\n".join(lines)
    else:  # text format (default)
        lines = []
        for row in rows:
            lines.append(f"{row['group']}:{row['name']} ({row['id']}, {row['type']}): {row['label']}")
        return "\n".join(lines)
