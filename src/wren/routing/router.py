"""Compiled router with trie-based path matching.

Supports static segments (``/users``) and single-segment parameters
(``/users/{id}``). Static children win over the parameter edge.
"""

from wren.errors import ConfigurationError, MethodNotAllowed, NotFound
from wren.routing.route import Route, RouteMatch


def split_path(path: str) -> list[str]:
    """Split a URL or route path into its non-empty segments."""
    return [part for part in path.strip("/").split("/") if part]


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "param_name", "routes_by_method")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.param_name: str | None = None
        self.param_child: _TrieNode | None = None
        self.routes_by_method: dict[str, Route] = {}


class Router:
    """Compiled router.

    Usage::

        router = Router()
        router.add(Route("/users/{id}", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for segment in split_path(route.path):
            if segment.startswith("{") and segment.endswith("}"):
                name = segment[1:-1]
                if node.param_child is None:
                    node.param_name = name
                    node.param_child = _TrieNode()
                elif node.param_name != name:
                    msg = (
                        f"Route {route.path!r} names parameter {{{name}}} where "
                        f"another route already uses {{{node.param_name}}}."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child
            else:
                node = node.children.setdefault(segment, _TrieNode())

        for method in route.methods:
            node.routes_by_method[method] = route

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        found = self._match_node(self._root, split_path(path), 0, {})
        if found is None:
            raise NotFound(f"No route matches {method} {path!r}")

        node, params = found
        route = node.routes_by_method.get(method)
        if route is None and method == "HEAD":
            route = node.routes_by_method.get("GET")
        if route is None:
            raise MethodNotAllowed(frozenset(node.routes_by_method))
        return RouteMatch(route=route, path_params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[_TrieNode, dict[str, str]] | None:
        if index == len(parts):
            return (node, params) if node.routes_by_method else None

        part = parts[index]
        child = node.children.get(part)
        if child is not None:
            found = self._match_node(child, parts, index + 1, params)
            if found is not None:
                return found

        if node.param_child is not None and node.param_name is not None:
            return self._match_node(
                node.param_child, parts, index + 1, {**params, node.param_name: part}
            )
        return None
