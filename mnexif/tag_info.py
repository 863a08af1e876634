# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag descriptors and tag registries

A TagDescriptor is the static definition of one MakerNote tag: its ID,
symbolic name, label, description, expected type/count and the formatting
rule used to print it. A TagRegistry holds all descriptors of one tag group
together with the group's "unknown tag" sentinel, which is returned whenever
a lookup does not match.

Registries are built once, at import time, and never modified afterwards.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

from mnexif.exceptions import RegistryError
from mnexif.value_types import TypeId

if TYPE_CHECKING:
    from mnexif.print_functions import FormattingRule

logger = logging.getLogger(__name__)

# Reserved tag ID of the per-group "unknown tag" descriptor
UNKNOWN_TAG_ID = 0xFFFF

# Expected count meaning "any number of components"
ANY_COUNT = -1


class GroupId(Enum):
    """MakerNote tag groups. The value is the group prefix used in tag keys."""
    SAMSUNG2 = 'Samsung2'
    SAMSUNG_PW = 'SamsungPictureWizard'


class SectionId(Enum):
    """Sections tags are filed under in schema listings."""
    MAKER_TAGS = 'makerTags'


class TagDetails:
    """
    Enumerated lookup table: raw numeric value -> label.

    Pairs keep their declaration order; lookup is exact match only.
    """

    __slots__ = ('_pairs', '_index')

    def __init__(self, pairs: Sequence[Tuple[int, str]]):
        """
        Args:
            pairs: (raw value, untranslated label) pairs

        Raises:
            RegistryError: If a raw value appears twice
        """
        self._pairs: Tuple[Tuple[int, str], ...] = tuple((int(raw), label) for raw, label in pairs)
        self._index: Dict[int, str] = {}
        for raw, label in self._pairs:
            if raw in self._index:
                raise RegistryError(f"Duplicate value {raw} in lookup table ('{self._index[raw]}', '{label}')")
            self._index[raw] = label

    def find(self, raw: int) -> Optional[str]:
        """Return the untranslated label for raw, or None."""
        return self._index.get(raw)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, raw: object) -> bool:
        return raw in self._index

    def __repr__(self) -> str:
        return f"TagDetails({list(self._pairs)!r})"


@dataclass(frozen=True)
class TagDescriptor:
    """Static definition of one MakerNote tag."""
    id: int
    name: str
    label: str
    description: str
    group: GroupId
    section: SectionId
    type_id: TypeId
    count: int
    formatter: 'FormattingRule'

    @property
    def is_unknown(self) -> bool:
        return self.id == UNKNOWN_TAG_ID

    @property
    def key(self) -> str:
        """Group-qualified tag key, e.g. 'Samsung2:LensType'."""
        return f"{self.group.value}:{self.name}"


class TagRegistry:
    """
    All tag descriptors of one group, plus the group's unknown-tag sentinel.

    Lookup by ID is a dictionary probe; the sentinel is kept outside the
    searchable keyspace and returned on any miss.
    """

    def __init__(self, group: GroupId, descriptors: Sequence[TagDescriptor], unknown: TagDescriptor):
        """
        Args:
            group: Group these descriptors belong to
            descriptors: Regular descriptors in declaration order
            unknown: Sentinel descriptor (ID 0xFFFF)

        Raises:
            RegistryError: If the table violates the registry invariants
        """
        if unknown.id != UNKNOWN_TAG_ID:
            raise RegistryError(f"Sentinel of group {group.value} must use ID 0x{UNKNOWN_TAG_ID:04x}")
        if unknown.group is not group:
            raise RegistryError(f"Sentinel '{unknown.name}' does not belong to group {group.value}")

        self.group = group
        self._unknown = unknown
        self._descriptors: Tuple[TagDescriptor, ...] = tuple(descriptors)
        self._by_id: Dict[int, TagDescriptor] = {}
        self._by_name: Dict[str, TagDescriptor] = {}

        for descriptor in self._descriptors:
            if descriptor.group is not group:
                raise RegistryError(f"Tag '{descriptor.name}' belongs to {descriptor.group.value}, not {group.value}")
            if not 0 <= descriptor.id < UNKNOWN_TAG_ID:
                raise RegistryError(f"Tag '{descriptor.name}' uses reserved or invalid ID 0x{descriptor.id:04x}")
            if descriptor.id in self._by_id:
                raise RegistryError(f"Duplicate tag ID 0x{descriptor.id:04x} in group {group.value}")
            self._by_id[descriptor.id] = descriptor
            self._by_name[descriptor.name] = descriptor

    @property
    def unknown(self) -> TagDescriptor:
        return self._unknown

    def lookup(self, tag_id: int) -> TagDescriptor:
        """
        Find the descriptor for a tag ID.

        Args:
            tag_id: Tag ID (0..0xFFFF)

        Returns:
            Matching descriptor, or the group's unknown-tag sentinel
        """
        descriptor = self._by_id.get(tag_id)
        if descriptor is None:
            logger.debug("Unknown %s tag 0x%04x", self.group.value, tag_id)
            return self._unknown
        return descriptor

    def lookup_name(self, name: str) -> TagDescriptor:
        """Find a descriptor by symbolic name; the sentinel on a miss."""
        return self._by_name.get(name, self._unknown)

    def tag_list(self) -> List[TagDescriptor]:
        """All descriptors in declaration order, sentinel last."""
        return list(self._descriptors) + [self._unknown]

    def sub_tag_ids(self) -> List[int]:
        """Known tag IDs in ascending order (sentinel excluded)."""
        return sorted(self._by_id)

    def __contains__(self, tag_id: object) -> bool:
        return tag_id in self._by_id

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[TagDescriptor]:
        return iter(self._descriptors)
