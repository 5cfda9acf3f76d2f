from markupsafe import escape

from catbadge.text_direction import text_direction


def icon_html(name: str) -> str:
    name = escape(name)
    return (
        f'<svg class="fa d-icon d-icon-{name} svg-icon svg-string" '
        f'xmlns="http://www.w3.org/2000/svg"><use href="#{name}"></use></svg>'
    )


def build_topic_count(count: int, translate) -> str:
    label = escape(translate("category_row.topic_count", count=count))
    return f'<span class="topic-count" aria-label="{label}">&times; {count}</span>'


def build_plus_subcategories(count: int, translate) -> str:
    label = escape(translate("category_row.plus_subcategories", count=count))
    return f'<span class="plus-subcategories">{label}</span>'


def category_url(category, opts, context) -> str:
    if opts.url:
        return opts.url
    slug = context.categories.slug_for(category)
    return context.url(f"/c/{slug}/{category.id}")


def default_category_link_renderer(category, opts, context) -> str:
    """Badge HTML for a single category, without its ancestors."""
    site = context.site
    restricted = bool(category.read_restricted)
    tag_name = "span" if opts.link_disabled else "a"
    href = "" if opts.link_disabled else f' href="{escape(category_url(category, opts, context))}"'
    extra_classes = f" {escape(opts.extra_classes)}" if opts.extra_classes else ""

    parent = None if opts.hide_parent else context.categories.parent_of(category)

    class_names = "badge-category"
    if restricted:
        class_names += " restricted"

    data_attributes = f'data-category-id="{escape(category.id)}"'
    if parent:
        class_names += " --has-parent"
        data_attributes += f' data-parent-category-id="{escape(parent.id)}"'

    title = ""
    if category.description_text:
        title = f' title="{escape(category.description_text)}"'

    html = f'<span {data_attributes} data-drop-close="true" class="{class_names}"{title}>'

    if restricted:
        html += icon_html("lock")
    for decorator in context.registry.icon_decorators:
        icon_name = decorator(category)
        if icon_name:
            html += icon_html(icon_name)

    category_dir = ""
    if site.support_mixed_text_direction:
        category_dir = f' dir="{text_direction(category.name)}"'
    html += f'<span class="badge-category__name"{category_dir}>{escape(category.name)}</span>'
    html += "</span>"

    if opts.topic_count:
        html += build_topic_count(opts.topic_count, context.translate)

    after_wrapper = ""
    if opts.plus_subcategories and opts.last_subcategory:
        after_wrapper = build_plus_subcategories(opts.plus_subcategories, context.translate)

    return (
        f'<{tag_name} class="badge-category__wrapper{extra_classes}"{href}>'
        f"{html}</{tag_name}>{after_wrapper}"
    )
