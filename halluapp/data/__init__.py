"""Static data files shipped with the package."""
from __future__ import annotations

from importlib import resources
import json
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=None)
def load_catalog() -> list[dict[str, Any]]:
    """Return the raw category/subcategory catalog."""
    with resources.files(__name__).joinpath("categories.json").open(
        "r", encoding="utf-8"
    ) as fp:
        return json.load(fp)["categories"]
