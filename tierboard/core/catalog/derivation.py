"""ItemSet derivation: Catalog -> ordered list of selectable groups"""

from __future__ import annotations

from typing import Iterable, Optional

from .models import Catalog, ItemSet, PackageEntry

ALL_TAG = "all"
ALL_TAG_TITLE = "All Items"


def derive_item_sets(catalog: Catalog) -> list[ItemSet]:
    """Expand every package into its "all" set followed by its tag sets.

    Packages keep catalog order. Within a package the "all" set comes first
    (always emitted, even when empty), then one set per tag in tag-map order.
    Tags with no matching image produce nothing.
    """
    sets: list[ItemSet] = []
    for package in catalog.packages.values():
        sets.extend(_derive_package(package))
    return sets


def _derive_package(package: PackageEntry) -> list[ItemSet]:
    sets = [
        ItemSet(
            package_name=package.name,
            package_display_name=package.display_name,
            tag_name=ALL_TAG,
            tag_title=ALL_TAG_TITLE,
            images=tuple(package.filenames),
        )
    ]

    for tag_name, tag_meta in package.tags.items():
        tagged = tuple(
            image.filename for image in package.images if tag_name in image.tags
        )
        if not tagged:
            continue
        sets.append(
            ItemSet(
                package_name=package.name,
                package_display_name=package.display_name,
                tag_name=tag_name,
                tag_title=tag_meta.title,
                images=tagged,
            )
        )
    return sets


def find_item_set(
    item_sets: Iterable[ItemSet], package_name: str, tag_name: str
) -> Optional[ItemSet]:
    """Lookup by (package, tag). None if absent or suppressed."""
    for item_set in item_sets:
        if item_set.package_name == package_name and item_set.tag_name == tag_name:
            return item_set
    return None


def group_by_package(item_sets: Iterable[ItemSet]) -> dict[str, list[ItemSet]]:
    """Group for a per-package selection menu. Order is preserved."""
    grouped: dict[str, list[ItemSet]] = {}
    for item_set in item_sets:
        grouped.setdefault(item_set.package_name, []).append(item_set)
    return grouped
