"""Catalog loader: imageset.config.json -> Catalog"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tierboard.core.logging import get_logger

from .models import Catalog, ImageEntry, PackageEntry, TagMeta

logger = get_logger(__name__)


def load_catalog(path: str | Path) -> Catalog:
    """Read a catalog document from disk.

    A missing file or invalid JSON propagates; malformed entries inside a
    valid document are skipped with a warning.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw: dict[str, Any] = json.load(f)

    catalog = catalog_from_dict(raw)
    logger.info("Loaded %d packages from %s", len(catalog), path)
    return catalog


def catalog_from_dict(raw: dict[str, Any]) -> Catalog:
    """Build a Catalog from the parsed document.

    Shape: {"packages": {name: {displayName, images: [...], tags: {...}}}}.
    Package, image and tag order follow the document.
    """
    packages: dict[str, PackageEntry] = {}
    if not isinstance(raw, dict):
        logger.warning("Catalog document is not an object: %s", type(raw).__name__)
        return Catalog(packages=packages)
    raw_packages = raw.get("packages") or {}
    if not isinstance(raw_packages, dict):
        logger.warning("Catalog packages is not an object: %s", type(raw_packages).__name__)
        return Catalog(packages=packages)

    for name, raw_package in raw_packages.items():
        try:
            packages[name] = _build_package(name, raw_package)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("Failed to load package: %s: %s", name, e)
    return Catalog(packages=packages)


def _build_package(name: str, raw: dict[str, Any]) -> PackageEntry:
    images: list[ImageEntry] = []
    for raw_image in raw.get("images") or []:
        try:
            images.append(_build_image(raw_image))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("Skipping image in package %s: %s", name, e)

    tags: dict[str, TagMeta] = {}
    for key, raw_tag in (raw.get("tags") or {}).items():
        raw_tag = raw_tag or {}
        tags[key] = TagMeta(
            title=raw_tag.get("title", ""),
            description=raw_tag.get("description", ""),
            category=raw_tag.get("category", ""),
        )

    package = PackageEntry(
        name=name,
        display_name=raw.get("displayName", name),
        images=tuple(images),
        tags=tags,
    )
    _warn_undefined_tags(package)
    return package


def _build_image(raw: dict[str, Any]) -> ImageEntry:
    raw_tags = raw.get("tags") or []
    if isinstance(raw_tags, str):
        raw_tags = [raw_tags]
    return ImageEntry(
        filename=raw["filename"],
        label=raw.get("label") or "",
        tags=tuple(raw_tags),
    )


def _warn_undefined_tags(package: PackageEntry) -> None:
    """Image tags missing from the tag map never produce an ItemSet."""
    undefined = {
        tag for image in package.images for tag in image.tags if tag not in package.tags
    }
    if undefined:
        logger.debug(
            "Package %s references undefined tags: %s",
            package.name,
            ", ".join(sorted(undefined)),
        )
