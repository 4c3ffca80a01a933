"""Domain models shared by resolvers and the registry."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from scopebridge.annotations import declared_annotations
from scopebridge.scopes import SCOPE_SINGLETON, ScopedProxyMode

__all__ = [
    "AnnotationMetadata",
    "BeanDefinition",
    "AnnotatedBeanDefinition",
    "ScopeMetadata",
]


@dataclass(frozen=True)
class AnnotationMetadata:
    """Annotations declared on a component, readable without instantiating it.

    Attributes:
        annotation_types: Fully-qualified names of the declared annotations.
        attributes: Attribute values of each declared annotation, keyed by name.
    """

    annotation_types: frozenset[str] = frozenset()
    attributes: dict[str, dict[str, Any]] = field(default_factory=dict)

    @staticmethod
    def introspect(target: Any) -> "AnnotationMetadata":
        """Read the annotations declared on a class or function.

        Example:
            >>> @request_scoped
            ... class Cart: ...
            >>> AnnotationMetadata.introspect(Cart).annotation_types
            frozenset({'javax.enterprise.context.RequestScoped'})
        """
        declared = declared_annotations(target)
        return AnnotationMetadata(frozenset(declared), declared)

    def has_annotation(self, annotation_name: str) -> bool:
        return annotation_name in self.annotation_types

    def annotation_attributes(self, annotation_name: str) -> Optional[dict[str, Any]]:
        if not self.has_annotation(annotation_name):
            return None
        return dict(self.attributes.get(annotation_name, {}))


@dataclass(frozen=True)
class BeanDefinition:
    """Recipe for building a managed component.

    Attributes:
        name: Unique name of the component.
        factory: The callable that builds the component (function or class).
        provided_types: Types the built component can satisfy.
    """

    name: str
    factory: Callable
    provided_types: list[type] = field(default_factory=list)


@dataclass(frozen=True)
class AnnotatedBeanDefinition(BeanDefinition):
    """A :class:`BeanDefinition` that also carries annotation metadata."""

    metadata: AnnotationMetadata = field(default_factory=AnnotationMetadata)


@dataclass(frozen=True)
class ScopeMetadata:
    """Resolved scope of a bean definition.

    Attributes:
        scope_name: Name of the scope, e.g. ``"singleton"`` or ``"request"``.
        proxy_mode: How the host should proxy the bean.
    """

    scope_name: str = SCOPE_SINGLETON
    proxy_mode: ScopedProxyMode = ScopedProxyMode.NO
