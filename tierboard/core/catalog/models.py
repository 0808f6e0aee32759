"""Catalog domain models (no I/O)"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


@dataclass(frozen=True)
class TagMeta:
    """Tag metadata. Titles are not unique."""

    title: str
    description: str = ""
    category: str = ""


@dataclass(frozen=True)
class ImageEntry:
    filename: str  # "cat.png", expected unique within its package
    label: str = ""
    tags: tuple[str, ...] = ()  # frozen, so tuple


@dataclass(frozen=True)
class PackageEntry:
    """Image package: immutable. Loaded from imageset.config.json.

    `tags` keeps the document's key order; derivation relies on it.
    Image tags that are missing from `tags` are tolerated.
    """

    name: str
    display_name: str
    images: tuple[ImageEntry, ...] = ()
    tags: Mapping[str, TagMeta] = field(default_factory=dict)

    def find_image(self, filename: str) -> Optional[ImageEntry]:
        """First image with this filename; duplicates resolve to the first one."""
        for image in self.images:
            if image.filename == filename:
                return image
        return None

    @property
    def filenames(self) -> list[str]:
        return [image.filename for image in self.images]


@dataclass(frozen=True)
class Catalog:
    """Immutable set of packages, in document order."""

    packages: Mapping[str, PackageEntry] = field(default_factory=dict)

    def get(self, package_name: str) -> Optional[PackageEntry]:
        return self.packages.get(package_name)

    def __len__(self) -> int:
        return len(self.packages)


@dataclass(frozen=True)
class ItemSet:
    """Derived group of selectable images. Value type, never mutated."""

    package_name: str
    package_display_name: str
    tag_name: str
    tag_title: str
    images: tuple[str, ...]


@dataclass
class Item:
    """Ranking board entry.

    Built by the materializer or by the upload flow, owned by the board
    afterwards. `content` is editable; `id` is what undo-of-create removes by.
    """

    id: str
    content: str
    image_url: str
    tags: list[str] = field(default_factory=list)
