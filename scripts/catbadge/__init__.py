from catbadge.composer import category_badge_html, category_link_html
from catbadge.models import Category, RenderOptions, SiteConfig
from catbadge.registry import BadgeContext, BadgeRegistry
from catbadge.render import default_category_link_renderer
from catbadge.store import CategoryStore

__all__ = [
    "BadgeContext",
    "BadgeRegistry",
    "Category",
    "CategoryStore",
    "RenderOptions",
    "SiteConfig",
    "category_badge_html",
    "category_link_html",
    "default_category_link_renderer",
]
