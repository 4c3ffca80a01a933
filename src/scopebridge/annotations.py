"""Decorators that attach scope annotations to components.

Annotations are recorded on the decorated class or function itself under
``__annotation_metadata__``, keyed by fully-qualified annotation name. Only
annotations declared directly on a target are visible: a subclass does not
inherit the annotations of its bases.

Example:
    >>> @request_scoped
    ... class ShoppingCart:
    ...     pass
    >>>
    >>> @scope("prototype")
    ... def make_report() -> Report:
    ...     return Report()
"""

from typing import Any, Callable

from scopebridge.scopes import SCOPE_SINGLETON, ScopedProxyMode

__all__ = [
    "REQUEST_SCOPED",
    "SESSION_SCOPED",
    "APPLICATION_SCOPED",
    "SCOPE",
    "annotate",
    "declared_annotations",
    "request_scoped",
    "session_scoped",
    "application_scoped",
    "scope",
]

REQUEST_SCOPED = "javax.enterprise.context.RequestScoped"
SESSION_SCOPED = "javax.enterprise.context.SessionScoped"
APPLICATION_SCOPED = "javax.enterprise.context.ApplicationScoped"
SCOPE = "scopebridge.annotations.Scope"

_METADATA_ATTRIBUTE = "__annotation_metadata__"


def declared_annotations(target: Any) -> dict[str, dict[str, Any]]:
    """Return the annotations declared directly on ``target``.

    Args:
        target: A class or function.

    Returns:
        A new dictionary mapping annotation names to their attributes. Empty if
        nothing was declared.
    """
    declared = vars(target).get(_METADATA_ATTRIBUTE, {})
    return {name: dict(attributes) for name, attributes in declared.items()}


def annotate(target: Any, annotation_name: str, **attributes: Any) -> Any:
    """Declare ``annotation_name`` on ``target`` with the given attributes.

    Declaring an annotation that is already present replaces its attributes.
    """
    declared = declared_annotations(target)
    declared[annotation_name] = attributes
    setattr(target, _METADATA_ATTRIBUTE, declared)
    return target


def request_scoped(target: Any) -> Any:
    return annotate(target, REQUEST_SCOPED)


def session_scoped(target: Any) -> Any:
    return annotate(target, SESSION_SCOPED)


def application_scoped(target: Any) -> Any:
    return annotate(target, APPLICATION_SCOPED)


def scope(
    value: str = SCOPE_SINGLETON,
    proxy_mode: ScopedProxyMode = ScopedProxyMode.DEFAULT,
) -> Callable[[Any], Any]:
    """Declare the host container's own scope annotation.

    Args:
        value: The scope name, e.g. ``"prototype"``.
        proxy_mode: How the host should proxy the bean. ``DEFAULT`` defers to
            the resolver's configured default.

    Returns:
        A decorator returning its target unchanged.
    """
    def decorator(target: Any) -> Any:
        return annotate(target, SCOPE, value=value, proxy_mode=proxy_mode)

    return decorator
