# category_badges/tests/unit/test_build_badges.py
"""Unit tests for loading, validating and rendering the badge preview page."""

from __future__ import annotations

import json
from pathlib import Path

import build_badges
from catbadge.data_loader import load_categories
from catbadge.models import Category
from catbadge.validate import validate_categories
from templating import make_env

TEMPLATES = Path(__file__).resolve().parents[2] / "templates"


def _write_json(path: Path, payload) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def test_load_categories_filters_bad_rows(tmp_path: Path) -> None:
    path = tmp_path / "categories.json"
    _write_json(
        path,
        [
            {"id": "1", "name": "General", "slug": "general", "parent_id": ""},
            {"id": "2", "name": "Help", "parent_category_id": "1", "read_restricted": "true"},
            {"id": "", "name": "No id"},
            {"id": "3"},
            "not a row",
        ],
    )

    categories = load_categories(path)

    assert [c.id for c in categories] == ["1", "2"]
    assert categories[0].parent_category_id is None
    assert categories[1].parent_category_id == "1"
    assert categories[1].read_restricted is True
    assert categories[1].slug == ""


def test_validate_reports_cycles_and_dangling_parents() -> None:
    categories = [
        Category(id=1, name="A", parent_category_id=2),
        Category(id=2, name="B", parent_category_id=1),
        Category(id=3, name="C", parent_category_id=99),
        Category(id=3, name="C again"),
    ]

    errors, warnings = validate_categories(categories)

    assert errors == ["Category cycle detected: 1 -> 2 -> 1"]
    assert "Duplicate category ids: ['3']" in warnings
    assert "Category 3 has parent_category_id=99 which does not exist" in warnings


def test_validate_accepts_clean_tree(chain) -> None:
    assert validate_categories(chain) == ([], [])


def test_category_link_global_in_templates(chain, make_context) -> None:
    env = make_env(make_context(), template_dir=TEMPLATES)
    tpl = env.from_string("{{ category_link(cat, link=false) }}|{{ root('/x') }}")

    html = tpl.render(cat=chain[3])

    assert html.startswith('<span class="badge-category__wrapper">')
    assert html.endswith("|/x")


def test_main_writes_preview_page(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("BASE_PATH", raising=False)
    monkeypatch.setenv("MAX_CATEGORY_NESTING", "3")
    data_path = tmp_path / "categories.json"
    _write_json(
        data_path,
        [
            {"id": 1, "name": "Uncategorized", "slug": "uncategorized"},
            {"id": 2, "name": "Support", "slug": "support"},
            {"id": 3, "name": "Install", "slug": "install", "parent_category_id": 2},
        ],
    )

    status = build_badges.main(data_path=data_path, site_dir=tmp_path / "site", template_dir=TEMPLATES)

    assert status == 0
    page = (tmp_path / "site" / "categories" / "badges.html").read_text(encoding="utf-8")
    assert 'href="/c/support/install/3"' in page
    assert '<span class="plus-subcategories">+ 1 subcategory</span>' in page
    assert "&lt;a class" not in page


def test_main_refuses_cyclic_data(tmp_path: Path) -> None:
    data_path = tmp_path / "categories.json"
    _write_json(
        data_path,
        [
            {"id": 1, "name": "A", "parent_category_id": 2},
            {"id": 2, "name": "B", "parent_category_id": 1},
        ],
    )

    assert build_badges.main(data_path=data_path, site_dir=tmp_path / "site", template_dir=TEMPLATES) == 1
    assert not (tmp_path / "site").exists()
