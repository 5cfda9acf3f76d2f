"""Category badge composition.

``category_badge_html`` renders one category, optionally preceded by its
ancestors (outermost first). ``category_link_html`` is the template-facing
helper that whitelists caller options and marks the result safe for Jinja.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from markupsafe import Markup

from catbadge.models import Category, RenderOptions
from catbadge.registry import BadgeContext

logger = logging.getLogger(__name__)

LINK_OPTIONS = ("allow_uncategorized", "link", "extra_classes", "hide_parent", "recursive")


def is_suppressed(category: Category, options: RenderOptions, context: BadgeContext) -> bool:
    site = context.site
    if options.allow_uncategorized or not site.suppress_uncategorized_badge:
        return False
    if site.uncategorized_category_id is None:
        return False
    return str(category.id) == str(site.uncategorized_category_id)


def category_badge_html(
    category: Optional[Category],
    options: Optional[RenderOptions] = None,
    *,
    context: BadgeContext,
) -> str:
    if options is None:
        options = RenderOptions()

    if category is None or is_suppressed(category, options, context):
        return ""

    renderer = context.registry.active_renderer
    depth = (options.depth or 1) + 1

    if options.recursive and depth <= context.site.max_category_nesting:
        parent = context.categories.parent_of(category)
        last_subcategory = not options.depth
        parent_badges = category_badge_html(
            parent,
            options.replace(depth=depth, last_subcategory=False),
            context=context,
        )
        leaf_options = options.replace(depth=depth, last_subcategory=last_subcategory)
        return parent_badges + renderer(category, leaf_options, context)

    if options.recursive and category.parent_category_id is not None:
        logger.debug("Stopped badge ascent at category %s (depth %d)", category.id, depth)

    return renderer(category, options, context)


def category_link_html(category: Optional[Category], context: BadgeContext, **options: Any) -> Markup:
    hash_options = options.get("hash")
    if isinstance(hash_options, Mapping):
        options = dict(hash_options)

    kept = {}
    for name in LINK_OPTIONS:
        value = options.get(name)
        if name == "link":
            if value is not None:
                kept[name] = value
        elif value:
            kept[name] = value if name == "extra_classes" else True

    return Markup(category_badge_html(category, RenderOptions(**kept), context=context))
