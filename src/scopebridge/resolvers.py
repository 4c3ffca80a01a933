"""Strategies that decide the scope of a bean definition.

:class:`AnnotationScopeMetadataResolver` is the host container's default
strategy and understands only its own :func:`~scopebridge.annotations.scope`
annotation. :class:`CdiScopeMetadataResolver` additionally maps the CDI scope
markers onto the host's scope names, so a component can be declared entirely
with CDI annotations:

    >>> @request_scoped
    ... class ShoppingCart:
    ...     pass

and select the resolver when configuring the registry:

    >>> registry = BeanDefinitionRegistry(
    ...     scope_resolver="scopebridge.resolvers.CdiScopeMetadataResolver"
    ... )
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from scopebridge.annotations import (
    APPLICATION_SCOPED,
    REQUEST_SCOPED,
    SCOPE,
    SESSION_SCOPED,
)
from scopebridge.domain import AnnotatedBeanDefinition, BeanDefinition, ScopeMetadata
from scopebridge.errors import ConfigurationError
from scopebridge.scopes import (
    SCOPE_APPLICATION,
    SCOPE_REQUEST,
    SCOPE_SESSION,
    SCOPE_SINGLETON,
    ScopedProxyMode,
)

__all__ = [
    "SCOPE_ANNOTATIONS",
    "ScopeMetadataResolver",
    "AnnotationScopeMetadataResolver",
    "CdiScopeMetadataResolver",
]

logger = logging.getLogger(__name__)

SCOPE_ANNOTATIONS: tuple[tuple[str, str], ...] = (
    (REQUEST_SCOPED, SCOPE_REQUEST),
    (SESSION_SCOPED, SCOPE_SESSION),
    (APPLICATION_SCOPED, SCOPE_APPLICATION),
)
"""CDI annotation names and the scope each maps to, in priority order."""


class ScopeMetadataResolver(ABC):
    """Decides the scope of a bean definition."""

    @abstractmethod
    def resolve(self, definition: BeanDefinition) -> ScopeMetadata:
        """Return the scope for ``definition``."""
        ...


class AnnotationScopeMetadataResolver(ScopeMetadataResolver):
    """Resolve scopes from the host's :func:`~scopebridge.annotations.scope` annotation.

    Definitions without annotation metadata, or without the annotation, are
    singletons.

    Args:
        default_proxy_mode: Proxy mode used when the annotation leaves it as
            ``DEFAULT``.

    Raises:
        ConfigurationError: If ``default_proxy_mode`` is itself ``DEFAULT``.
    """

    def __init__(self, default_proxy_mode: ScopedProxyMode = ScopedProxyMode.NO):
        if default_proxy_mode is ScopedProxyMode.DEFAULT:
            raise ConfigurationError("Default proxy mode must not be DEFAULT")
        self._default_proxy_mode = default_proxy_mode

    def resolve(self, definition: BeanDefinition) -> ScopeMetadata:
        if not isinstance(definition, AnnotatedBeanDefinition):
            return ScopeMetadata()

        attributes = definition.metadata.annotation_attributes(SCOPE)
        if attributes is None:
            return ScopeMetadata()

        proxy_mode = attributes.get("proxy_mode", ScopedProxyMode.DEFAULT)
        if proxy_mode is ScopedProxyMode.DEFAULT:
            proxy_mode = self._default_proxy_mode
        return ScopeMetadata(attributes.get("value", SCOPE_SINGLETON), proxy_mode)


class CdiScopeMetadataResolver(ScopeMetadataResolver):
    """Map CDI scope annotations onto the host's scope names.

    The first entry of :data:`SCOPE_ANNOTATIONS` declared on the definition
    wins, so request beats session beats application. Anything else, including
    definitions without annotation metadata, is passed to ``default`` and its
    result returned unchanged.

    Args:
        default: The strategy to fall back on. Defaults to an
            :class:`AnnotationScopeMetadataResolver`.
    """

    def __init__(self, default: Optional[ScopeMetadataResolver] = None):
        self._default = AnnotationScopeMetadataResolver() if default is None else default

    def resolve(self, definition: BeanDefinition) -> ScopeMetadata:
        if isinstance(definition, AnnotatedBeanDefinition):
            annotation_types = definition.metadata.annotation_types
            for annotation_name, scope_name in SCOPE_ANNOTATIONS:
                if annotation_name in annotation_types:
                    logger.debug(
                        "Mapped %s on %r to scope %r",
                        annotation_name,
                        definition.name,
                        scope_name,
                    )
                    return ScopeMetadata(scope_name)

        logger.debug("Delegating scope of %r to %r", definition.name, self._default)
        return self._default.resolve(definition)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(default={self._default!r})"
