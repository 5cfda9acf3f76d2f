"""Value objects shared by the badge renderer and composer."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from templating import normalize_base_path

CategoryId = Union[int, str]


@dataclass(frozen=True)
class Category:
    id: CategoryId
    name: str
    slug: str = ""
    parent_category_id: Optional[CategoryId] = None
    description_text: Optional[str] = None
    read_restricted: bool = False


def _check_count(field_name: str, value: Any, allow_none: bool = True) -> None:
    if value is None and allow_none:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{field_name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class RenderOptions:
    """Per-call badge options.

    ``depth`` and ``last_subcategory`` are filled in by the composer while it
    walks up the parent chain; callers normally leave them unset.
    ``link`` accepts ``False`` or the string ``"false"`` to drop the link.
    """

    url: Optional[str] = None
    link: Union[bool, str, None] = None
    extra_classes: Optional[str] = None
    hide_parent: bool = False
    recursive: bool = False
    depth: Optional[int] = None
    last_subcategory: bool = False
    topic_count: Optional[int] = None
    plus_subcategories: Optional[int] = None
    allow_uncategorized: bool = False

    def __post_init__(self) -> None:
        _check_count("depth", self.depth)
        _check_count("topic_count", self.topic_count)
        _check_count("plus_subcategories", self.plus_subcategories)

    @property
    def link_disabled(self) -> bool:
        # older template callers pass stringified booleans
        return self.link is False or self.link == "false"

    def replace(self, **changes: Any) -> "RenderOptions":
        return replace(self, **changes)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SiteConfig:
    uncategorized_category_id: Optional[CategoryId] = 1
    suppress_uncategorized_badge: bool = True
    max_category_nesting: int = 2
    support_mixed_text_direction: bool = False
    base_path: str = ""

    def __post_init__(self) -> None:
        nesting = self.max_category_nesting
        if isinstance(nesting, bool) or not isinstance(nesting, int) or nesting < 1:
            raise ValueError(f"max_category_nesting must be an integer >= 1, got {nesting!r}")

    @classmethod
    def from_env(cls) -> "SiteConfig":
        uncategorized = (os.environ.get("UNCATEGORIZED_CATEGORY_ID") or "").strip()
        return cls(
            uncategorized_category_id=int(uncategorized) if uncategorized.isdigit() else (uncategorized or 1),
            suppress_uncategorized_badge=_env_bool("SUPPRESS_UNCATEGORIZED_BADGE", True),
            max_category_nesting=_env_int("MAX_CATEGORY_NESTING", 2),
            support_mixed_text_direction=_env_bool("SUPPORT_MIXED_TEXT_DIRECTION", False),
            base_path=normalize_base_path(os.environ.get("BASE_PATH", "")),
        )
