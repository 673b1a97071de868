"""Server-template emission for component trees.

Bound props become ``th:`` attributes with ``${...}`` expressions; the
static prop value is kept as element content so the template still reads
sensibly when opened as a plain HTML file.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple

from ...export import ExportTemplateRegistry, RenderMode, render_export_template
from ...model import ComponentInstance
from ..common import (
    CONTAINER_COMPONENTS,
    LABEL_TAGS,
    NAVBAR_COMPONENTS,
    element_id,
    indent_for,
    nav_items,
    text_prop,
)
from ..styles import escape_attr, escape_html, style_attr
from .bindings import binding_for

Emitter = Callable[["ServerRenderer", ComponentInstance, int], str]

SERVER_LABEL_TAGS = {**LABEL_TAGS, "span": "span", "label": "label"}
DEFAULT_EMPTY_MESSAGE = "No items to display"


def _opening(component: ComponentInstance, classes: str, extra: str = "") -> str:
    return f'id="{element_id(component)}" class="{classes}"{style_attr(component.styles)}{extra}'


def _th_text(component: ComponentInstance, prop: str = "text") -> str:
    expression = binding_for(component, prop)
    return f' th:text="{escape_attr(expression)}"' if expression else ""


def _emit_label(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    tag = SERVER_LABEL_TAGS.get(text_prop(component, "variant"), "span")
    text = text_prop(component, "text")
    attrs = _opening(component, "component label", _th_text(component))
    return f"{indent_for(depth)}<{tag} {attrs}>{escape_html(text)}</{tag}>"


def _emit_button(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    text = escape_html(text_prop(component, "text", default="Click Me"))
    url = component.navigation_url()
    if url:
        attrs = _opening(component, "component button", f' th:href="@{{{escape_attr(url)}}}"')
        return f"{indent_for(depth)}<a {attrs}>{text}</a>"
    return f"{indent_for(depth)}<button {_opening(component, 'component button')}>{text}</button>"


def _emit_image(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    src = text_prop(component, "src", "url")
    alt = text_prop(component, "alt")
    bound_src = binding_for(component, "src") or binding_for(component, "url")
    bound_alt = binding_for(component, "alt")

    if bound_src:
        source_attr = f'th:src="{escape_attr(bound_src)}"'
    elif src.startswith("/"):
        source_attr = f'th:src="@{{{escape_attr(src)}}}"'
    else:
        source_attr = f'src="{escape_attr(src)}"'
    alt_attr = f'th:alt="{escape_attr(bound_alt)}"' if bound_alt else f'alt="{escape_html(alt)}"'
    return (
        f'{indent_for(depth)}<img id="{element_id(component)}" class="component image" '
        f"{source_attr} {alt_attr}{style_attr(component.styles)} />"
    )


def _emit_textbox(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    # Rich text: kept unescaped, and bound content uses th:utext.
    content_key = "content" if component.props.get("content") or "content" in component.template_bindings else "text"
    expression = binding_for(component, content_key)
    bound = f' th:utext="{escape_attr(expression)}"' if expression else ""
    content = text_prop(component, "content", "text")
    return f"{indent_for(depth)}<div {_opening(component, 'component textbox', bound)}>{content}</div>"


def _emit_container(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    indent = indent_for(depth)
    classes = "component container"
    if component.component_id == "ScrollableContainer":
        classes = f"{classes} scrollable-container"
    children_html = renderer.render_children(component, depth + 1)
    if children_html:
        return f"{indent}<div {_opening(component, classes)}>\n{children_html}\n{indent}</div>"
    return f"{indent}<div {_opening(component, classes)}></div>"


def collection_expression(component: ComponentInstance, *, use_props: bool = True) -> str:
    """Expression (without ``${}``) naming the collection an iterator walks."""

    config = component.iterator_config
    data_path = config.data_path if config and config.data_path else ""
    if not data_path and use_props:
        data_path = text_prop(component, "dataPath")
    if component.data_source_ref:
        base = f"dataSources['{component.data_source_ref}']"
        return f"{base}.{data_path}" if data_path else base
    return data_path or "items"


def iterator_aliases(component: ComponentInstance) -> Tuple[str, str]:
    config = component.iterator_config
    item_alias = (config.item_alias if config else "") or text_prop(component, "itemAlias", default="item")
    index_alias = (config.index_alias if config else "") or text_prop(component, "indexAlias", default="index")
    return item_alias, index_alias


def _emit_repeater(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    indent = indent_for(depth)
    item_alias, index_alias = iterator_aliases(component)
    collection = collection_expression(component)
    th_each = f"{item_alias}, {index_alias}Stat : ${{{collection}}}"
    empty_guard = f"${{{collection} == null or #lists.isEmpty({collection})}}"

    body = renderer.render_children(component, depth + 2)
    if not body:
        body = f'{indent_for(depth + 2)}<div th:text="${{{item_alias}}}">Item</div>'
    empty_message = escape_html(text_prop(component, "emptyMessage", default=DEFAULT_EMPTY_MESSAGE))

    lines = [
        f"{indent}<div {_opening(component, 'component repeater')}>",
        f'{indent}    <div th:each="{escape_attr(th_each)}">',
        body,
        f"{indent}    </div>",
        f'{indent}    <div class="repeater-empty" th:if="{escape_attr(empty_guard)}">',
        f"{indent}        {empty_message}",
        f"{indent}    </div>",
        f"{indent}</div>",
    ]
    return "\n".join(lines)


def _emit_data_list(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    indent = indent_for(depth)
    item_alias = (component.iterator_config.item_alias if component.iterator_config else "") or "item"
    collection = escape_attr("${" + collection_expression(component, use_props=False) + "}")
    list_style = text_prop(component, "listStyle", default="cards")

    if list_style == "table":
        columns = [column for column in component.props.get("columns") or [] if isinstance(column, Mapping)]
        header_cells = [
            f"{indent}                <th>{escape_html(column.get('header') or column.get('field') or '')}</th>"
            for column in columns
        ]
        data_cells = [
            f'{indent}                <td th:text="${{{item_alias}.{escape_attr(column.get("field") or "")}}}"></td>'
            for column in columns
        ]
        lines = [
            f"{indent}<div {_opening(component, 'component datalist table-style')}>",
            f'{indent}    <table class="data-table">',
            f"{indent}        <thead>",
            f"{indent}            <tr>",
            *header_cells,
            f"{indent}            </tr>",
            f"{indent}        </thead>",
            f"{indent}        <tbody>",
            f'{indent}            <tr th:each="{item_alias} : {collection}">',
            *data_cells,
            f"{indent}            </tr>",
            f"{indent}        </tbody>",
            f"{indent}    </table>",
            f"{indent}</div>",
        ]
        return "\n".join(lines)

    image_field = text_prop(component, "imageField", default="image")
    title_field = text_prop(component, "titleField", default="title")
    description_field = text_prop(component, "descriptionField", default="description")
    image_expr = f"${{{item_alias}.{image_field}}}"
    lines = [
        f"{indent}<div {_opening(component, 'component datalist cards-style')}>",
        f'{indent}    <div class="datalist-grid" th:each="{item_alias} : {collection}">',
        f'{indent}        <div class="card">',
        f'{indent}            <img th:if="{image_expr}" th:src="{image_expr}" class="card-image" />',
        f'{indent}            <h3 th:text="${{{item_alias}.{title_field}}}" class="card-title"></h3>',
        f'{indent}            <p th:text="${{{item_alias}.{description_field}}}" class="card-description"></p>',
        f"{indent}        </div>",
        f"{indent}    </div>",
        f"{indent}</div>",
    ]
    return "\n".join(lines)


def _emit_navbar(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    indent = indent_for(depth)
    brand_text = text_prop(component, "brandText", "brandName", default="Brand")
    brand_link = text_prop(component, "brandLink", default="/")

    item_lines: List[str] = []
    for item in nav_items(component.props.get("navItems") or []):
        active = ' class="active"' if item.get("active") else ""
        href = escape_attr(item.get("href") or "#")
        label = escape_html(item.get("label") or item.get("text") or "")
        item_lines.append(f'{indent}        <li{active}><a th:href="@{{{href}}}">{label}</a></li>')

    lines = [
        f"{indent}<nav {_opening(component, 'component navbar')}>",
        f'{indent}    <a th:href="@{{{escape_attr(brand_link)}}}" class="navbar-brand">{escape_html(brand_text)}</a>',
        f'{indent}    <ul class="navbar-nav">',
        *item_lines,
        f"{indent}    </ul>",
        f"{indent}</nav>",
    ]
    return "\n".join(lines)


def emit_generic(renderer: "ServerRenderer", component: ComponentInstance, depth: int) -> str:
    """Fallback: wrap children, else emit the text with ``th:text`` when bound."""

    indent = indent_for(depth)
    classes = f"component {component.component_id.lower()}"
    if component.children:
        children_html = renderer.render_children(component, depth + 1)
        return f"{indent}<div {_opening(component, classes)}>\n{children_html}\n{indent}</div>"

    text_key = "text" if component.props.get("text") or "text" in component.template_bindings else "content"
    text = text_prop(component, "text", "content")
    attrs = _opening(component, classes, _th_text(component, text_key))
    return f"{indent}<div {attrs}>{escape_html(text)}</div>"


BUILTIN_EMITTERS: Mapping[str, Emitter] = MappingProxyType(
    {
        "Label": _emit_label,
        "Button": _emit_button,
        "Image": _emit_image,
        "Textbox": _emit_textbox,
        **{name: _emit_container for name in CONTAINER_COMPONENTS},
        "Repeater": _emit_repeater,
        "DataList": _emit_data_list,
        **{name: _emit_navbar for name in NAVBAR_COMPONENTS},
    }
)


class ServerRenderer:
    """Render component trees to server templates using ``registry`` first."""

    def __init__(self, registry: Optional[ExportTemplateRegistry] = None) -> None:
        self.registry = registry if registry is not None else ExportTemplateRegistry()

    def render(self, component: ComponentInstance, depth: int = 0) -> str:
        template = self.registry.get(component.component_id, component.plugin_id)
        if template is not None:
            markup = render_export_template(
                template,
                component,
                self.render_children(component, depth + 1),
                RenderMode.SERVER,
            )
            return f"{indent_for(depth)}{markup}"
        emitter = BUILTIN_EMITTERS.get(component.component_id, emit_generic)
        return emitter(self, component, depth)

    def render_children(self, component: ComponentInstance, depth: int) -> str:
        return "\n".join(self.render(child, depth) for child in component.children)


__all__ = [
    "BUILTIN_EMITTERS",
    "ServerRenderer",
    "collection_expression",
    "emit_generic",
    "iterator_aliases",
]
