"""Route extractor: pull (name, component path) pairs out of a route file.

The route file must default-export an array of route objects, either
directly, behind an `as` type assertion, or through a variable:

    export default [{ name: "UserList", component: () => import("@/views/user/list.vue") }];
    export default [...] as RouteRecordRaw[];
    const routes = [...]; export default routes;

Every object with a `name` string and a `component` arrow function that
lazily imports from "@/views/" becomes a MatchedRoute. Anything else in
the array is skipped without complaint.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from tree_sitter import Node, Tree

from inject_define_options.errors import DefaultExportNotFoundError, RouteArrayNotFoundError
from inject_define_options.models import VIEWS_PREFIX, MatchedRoute
from inject_define_options.ts.core import (
    first_descendant,
    iter_descendants,
    node_text,
    parse_file,
    parse_source,
    significant_children,
    string_literal_value,
)

logger = logging.getLogger(__name__)


def _default_export_expression(root: Node) -> Node | None:
    """Return the expression of the first `export default <expr>` / `export = <expr>`."""
    for node in iter_descendants(root):
        if node.type != "export_statement":
            continue
        tokens = {child.type for child in node.children if not child.is_named}
        if "default" in tokens:
            value = node.child_by_field_name("value")
            if value is not None:
                return value
        elif "=" in tokens:
            named = significant_children(node)
            if named:
                return named[0]
    return None


def _as_array(expr: Node | None) -> Node | None:
    """Unwrap an array literal, optionally behind an `as` type assertion."""
    if expr is None:
        return None
    if expr.type == "array":
        return expr
    if expr.type == "as_expression":
        inner = significant_children(expr)
        if inner and inner[0].type == "array":
            return inner[0]
    return None


def _module_declarators(root: Node) -> Iterator[Node]:
    """Yield the variable declarators bound at module scope, in source order.

    Covers `const routes = ...` and `export const routes = ...`; locals
    inside functions or blocks are not module bindings.
    """
    for statement in root.named_children:
        declaration = statement
        if statement.type == "export_statement":
            declaration = statement.child_by_field_name("declaration")
            if declaration is None:
                continue
        if declaration.type not in ("lexical_declaration", "variable_declaration"):
            continue
        for child in declaration.named_children:
            if child.type == "variable_declarator":
                yield child


def _variable_initializer(root: Node, identifier: str) -> Node | None:
    """Find the initializer of the module-scope variable declared as `identifier`."""
    for node in _module_declarators(root):
        name = node.child_by_field_name("name")
        if name is not None and name.type == "identifier" and node_text(name) == identifier:
            return node.child_by_field_name("value")
    return None


def resolve_route_array(root: Node) -> Node:
    """Resolve the default export of a parsed route file to its array literal.

    Raises:
        DefaultExportNotFoundError: No `export default` expression
        RouteArrayNotFoundError: The export is not (or does not point to) an array
    """
    expr = _default_export_expression(root)
    if expr is None:
        raise DefaultExportNotFoundError()

    array = _as_array(expr)
    if array is None and expr.type == "identifier":
        array = _as_array(_variable_initializer(root, node_text(expr)))
    if array is None:
        raise RouteArrayNotFoundError()
    return array


def _property_key(pair: Node) -> str | None:
    key = pair.child_by_field_name("key")
    if key is None:
        return None
    if key.type == "string":
        return string_literal_value(key)
    if key.type == "property_identifier":
        return node_text(key)
    return None


def _get_property(obj: Node, name: str) -> Node | None:
    """Return the value node of the first `name: value` pair in an object literal."""
    for child in obj.named_children:
        if child.type == "pair" and _property_key(child) == name:
            return child.child_by_field_name("value")
    return None


def _is_parameterless(arrow: Node) -> bool:
    if arrow.child_by_field_name("parameter") is not None:
        return False
    params = arrow.child_by_field_name("parameters")
    return params is None or not significant_children(params)


def _dynamic_import_path(component: Node) -> str | None:
    """Extract the string passed to `import(...)` inside `() => import(...)`."""
    arrow = component if component.type == "arrow_function" else first_descendant(component, "arrow_function")
    if arrow is None or not _is_parameterless(arrow):
        return None

    for call in iter_descendants(arrow):
        if call.type != "call_expression":
            continue
        callee = call.child_by_field_name("function")
        if callee is None or node_text(callee) != "import":
            continue
        arguments = call.child_by_field_name("arguments")
        args = significant_children(arguments) if arguments is not None else []
        if not args or args[0].type != "string":
            return None
        return string_literal_value(args[0])
    return None


def _match_route(obj: Node) -> MatchedRoute | None:
    name_value = _get_property(obj, "name")
    component = _get_property(obj, "component")
    if name_value is None or component is None:
        return None

    name_node = name_value if name_value.type == "string" else first_descendant(name_value, "string")
    if name_node is None:
        return None
    name = string_literal_value(name_node)

    import_path = _dynamic_import_path(component)
    if not name or import_path is None or not import_path.startswith(VIEWS_PREFIX):
        return None

    relative_path = import_path[len(VIEWS_PREFIX):]
    if not relative_path:
        return None
    return MatchedRoute(name=name, relative_path=relative_path)


def extract_routes(source: Tree | str) -> list[MatchedRoute]:
    """Extract every lazily-imported view route, in array order.

    Args:
        source: Route file source code, or an already parsed Tree

    Returns:
        MatchedRoute list (possibly empty)

    Raises:
        RouteExtractionError: If the default export cannot be resolved to an array
    """
    tree = parse_source(source) if isinstance(source, str) else source
    array = resolve_route_array(tree.root_node)

    routes = []
    for element in array.named_children:
        if element.type != "object":
            continue
        route = _match_route(element)
        if route is not None:
            routes.append(route)
    logger.debug("Extracted %d route(s) from %d array element(s)", len(routes), array.named_child_count)
    return routes


def extract_routes_from_file(path: str | Path) -> list[MatchedRoute]:
    """Parse a route file and extract its view routes.

    Raises:
        FileNotFoundError: If the route file does not exist
        RouteExtractionError: If the default export cannot be resolved to an array
    """
    try:
        return extract_routes(parse_file(path))
    except (DefaultExportNotFoundError, RouteArrayNotFoundError) as exc:
        raise type(exc)(str(path)) from None
