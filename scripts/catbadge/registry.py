"""Extension points for badge rendering.

A :class:`BadgeRegistry` is created once when the application starts and
handed to the composer through :class:`BadgeContext`. Extensions register
icon decorators or swap the renderer on it; rendering only reads it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from catbadge.i18n import translate as default_translate
from catbadge.models import Category, RenderOptions, SiteConfig
from catbadge.store import CategoryStore
from templating import root

logger = logging.getLogger(__name__)

IconDecorator = Callable[[Category], Optional[str]]
Renderer = Callable[[Category, RenderOptions, "BadgeContext"], str]


class BadgeRegistry:
    def __init__(self, default_renderer: Optional[Renderer] = None):
        if default_renderer is None:
            from catbadge.render import default_category_link_renderer

            default_renderer = default_category_link_renderer

        self._lock = threading.Lock()
        self._default_renderer = default_renderer
        self._renderer = default_renderer
        self._icon_decorators: List[IconDecorator] = []

    def register_icon_decorator(self, decorator: IconDecorator) -> IconDecorator:
        """Append ``decorator``; usable as a function decorator too."""
        with self._lock:
            self._icon_decorators.append(decorator)
        logger.debug("Registered badge icon decorator %r", decorator)
        return decorator

    @property
    def icon_decorators(self) -> Tuple[IconDecorator, ...]:
        with self._lock:
            return tuple(self._icon_decorators)

    def set_renderer(self, renderer: Renderer) -> None:
        with self._lock:
            self._renderer = renderer
        logger.debug("Badge renderer replaced with %r", renderer)

    def reset_renderer(self) -> None:
        with self._lock:
            self._renderer = self._default_renderer

    @property
    def active_renderer(self) -> Renderer:
        with self._lock:
            return self._renderer


@dataclass
class BadgeContext:
    """Everything a badge render needs besides the category and options."""

    categories: CategoryStore
    site: SiteConfig = field(default_factory=SiteConfig)
    registry: BadgeRegistry = field(default_factory=BadgeRegistry)
    translate: Callable[..., str] = default_translate
    url_for: Optional[Callable[[str], str]] = None

    def url(self, path: str) -> str:
        if self.url_for is not None:
            return self.url_for(path)
        return root(path, base_path=self.site.base_path)
