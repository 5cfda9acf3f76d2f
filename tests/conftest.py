"""Shared fixtures for the badge tests."""

from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts"))

import pytest

from catbadge.models import Category, SiteConfig
from catbadge.registry import BadgeContext, BadgeRegistry
from catbadge.store import CategoryStore


@pytest.fixture
def chain():
    """Uncategorized plus a three-level chain: A -> B -> C."""
    return [
        Category(id=1, name="Uncategorized", slug="uncategorized"),
        Category(id=10, name="Alpha", slug="alpha"),
        Category(id=20, name="Beta", slug="beta", parent_category_id=10),
        Category(id=30, name="Gamma", slug="gamma", parent_category_id=20),
    ]


@pytest.fixture
def make_context(chain):
    def _make(categories=None, **site_settings) -> BadgeContext:
        return BadgeContext(
            categories=CategoryStore(chain if categories is None else categories),
            site=SiteConfig(**site_settings),
            registry=BadgeRegistry(),
        )

    return _make
