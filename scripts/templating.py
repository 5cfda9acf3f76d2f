from pathlib import Path
import os
from functools import partial
from jinja2 import Environment, FileSystemLoader, select_autoescape


def normalize_base_path(value: str) -> str:
    value = (value or "").strip()
    if value:
        return "/" + value.strip("/")
    return ""


BASE_PATH = normalize_base_path(os.environ.get("BASE_PATH", ""))

def root(path: str, base_path: str = None) -> str:
    if base_path is None:
        base_path = BASE_PATH
    return f"{base_path}{path}"

def make_env(context=None, template_dir="templates"):
    env = Environment(
        loader=FileSystemLoader(str(Path(template_dir))),
        autoescape=select_autoescape(["html", "xml"]),
    )
    base_path = context.site.base_path if context is not None else BASE_PATH
    env.globals["base_path"] = base_path
    env.globals["root"] = partial(root, base_path=base_path)

    if context is not None:
        # imported here so catbadge can depend on templating.root
        from catbadge.composer import category_link_html

        def category_link(category, **options):
            return category_link_html(category, context, **options)

        env.globals["category_link"] = category_link
    return env
