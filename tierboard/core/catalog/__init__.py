"""Catalog Core: pure Python, no I/O beyond the JSON loader"""

from .derivation import ALL_TAG, ALL_TAG_TITLE, derive_item_sets, find_item_set, group_by_package
from .loader import catalog_from_dict, load_catalog
from .materializer import IMAGE_URL_ROOT, materialize, strip_extension
from .models import Catalog, ImageEntry, Item, ItemSet, PackageEntry, TagMeta

__all__ = [
    "ALL_TAG",
    "ALL_TAG_TITLE",
    "Catalog",
    "IMAGE_URL_ROOT",
    "ImageEntry",
    "Item",
    "ItemSet",
    "PackageEntry",
    "TagMeta",
    "catalog_from_dict",
    "derive_item_sets",
    "find_item_set",
    "group_by_package",
    "load_catalog",
    "materialize",
    "strip_extension",
]
