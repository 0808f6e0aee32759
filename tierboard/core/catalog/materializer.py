"""Item materialization: ItemSet selection -> Items"""

from __future__ import annotations

from typing import Sequence

from tierboard.core.logging import get_logger

from .models import Catalog, Item

logger = get_logger(__name__)

IMAGE_URL_ROOT = "/images"


def item_id(package_name: str, tag_name: str, index: int) -> str:
    """`index` is the position in the selection, not in the package."""
    return f"{package_name}-{tag_name}-item-{index}"


def strip_extension(filename: str) -> str:
    """Text before the first '.'."""
    return filename.split(".", 1)[0]


def image_url(package_name: str, filename: str) -> str:
    return f"{IMAGE_URL_ROOT}/{package_name}/{filename}"


def materialize(
    catalog: Catalog,
    package_name: str,
    tag_name: str,
    selected_filenames: Sequence[str],
) -> list[Item]:
    """Build one Item per selected filename, in selection order.

    Never raises and never drops an input: an unknown package or filename
    falls back to the filename stem as content and no tags.
    """
    package = catalog.get(package_name)
    if package is None:
        logger.debug("Unknown package %s, using fallback item content", package_name)

    items: list[Item] = []
    for index, filename in enumerate(selected_filenames):
        image = package.find_image(filename) if package is not None else None
        if image is None and package is not None:
            logger.debug("Image %s not found in package %s", filename, package_name)

        content = image.label if image and image.label else strip_extension(filename)
        items.append(
            Item(
                id=item_id(package_name, tag_name, index),
                content=content,
                image_url=image_url(package_name, filename),
                tags=list(image.tags) if image else [],
            )
        )
    return items
