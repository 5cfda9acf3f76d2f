import logging
import sys
from pathlib import Path

from templating import make_env
from catbadge.composer import category_badge_html
from catbadge.data_loader import DATA, SITE, load_categories
from catbadge.models import RenderOptions, SiteConfig
from catbadge.registry import BadgeContext, BadgeRegistry
from catbadge.store import CategoryStore
from catbadge.validate import validate_categories


def build_context(categories, site=None, registry=None) -> BadgeContext:
    return BadgeContext(
        categories=CategoryStore(categories),
        site=site or SiteConfig.from_env(),
        registry=registry or BadgeRegistry(),
    )


def build_badges_page(site_dir: Path, tpl_badges, context: BadgeContext):
    out_dir = site_dir / "categories"
    out_dir.mkdir(parents=True, exist_ok=True)

    store = context.categories
    rows = []
    for cat in sorted(store.category_by_id.values(), key=lambda c: ((c.name or "").lower(), str(c.id))):
        subcategories = len(store.children_by_parent.get(str(cat.id), []))
        options = RenderOptions(
            recursive=True,
            plus_subcategories=subcategories or None,
        )
        rows.append({
            "category": cat,
            "badge": category_badge_html(cat, options, context=context),
        })

    html = tpl_badges.render(
        title="Category badges",
        rows=rows,
    )
    out_path = out_dir / "badges.html"
    out_path.write_text(html, encoding="utf-8")
    return out_path


def main(data_path: Path = DATA / "categories.json", site_dir: Path = SITE, template_dir="templates") -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    categories = load_categories(data_path)
    errors, warnings = validate_categories(categories)
    for w in warnings:
        print(f"WARNING: {w}")
    for e in errors:
        print(f"ERROR: {e}")
    if errors:
        return 1

    context = build_context(categories)
    env = make_env(context, template_dir=template_dir)
    out_path = build_badges_page(site_dir, env.get_template("badges.html"), context)

    print(f"✔ {out_path} created ({len(categories)} categories)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
