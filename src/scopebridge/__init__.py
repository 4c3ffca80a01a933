"""Scope resolution for annotated components.

scopebridge lets components be scoped with CDI-style annotations
(``RequestScoped``, ``SessionScoped``, ``ApplicationScoped``) while the host
container keeps its own scope names. :class:`CdiScopeMetadataResolver` maps the
annotations to ``"request"``, ``"session"`` and ``"application"`` and falls back
on the host's default annotation-driven resolution for everything else.

Basic Usage:
    >>> from scopebridge import BeanDefinitionRegistry, request_scoped
    >>>
    >>> registry = BeanDefinitionRegistry(
    ...     "scopebridge.resolvers.CdiScopeMetadataResolver"
    ... )
    >>>
    >>> @registry.component()
    ... @request_scoped
    ... class ShoppingCart:
    ...     pass
    >>>
    >>> registry.resolve_scope("ShoppingCart").scope_name
    'request'

The package consists of:
    - annotations: Decorators declaring scope annotations on components
    - domain: Bean definitions, annotation metadata and scope metadata
    - resolvers: Scope resolution strategies
    - registry: Bean definition registration and resolver configuration
    - scopes: Scope names and proxy modes
    - errors: Library exceptions
"""

from scopebridge.annotations import (
    application_scoped,
    request_scoped,
    scope,
    session_scoped,
)
from scopebridge.domain import (
    AnnotatedBeanDefinition,
    AnnotationMetadata,
    BeanDefinition,
    ScopeMetadata,
)
from scopebridge.errors import ConfigurationError, DefinitionError, ScopeBridgeError
from scopebridge.registry import BeanDefinitionRegistry
from scopebridge.resolvers import (
    AnnotationScopeMetadataResolver,
    CdiScopeMetadataResolver,
    ScopeMetadataResolver,
)
from scopebridge.scopes import ScopedProxyMode

__all__ = [
    "AnnotatedBeanDefinition",
    "AnnotationMetadata",
    "AnnotationScopeMetadataResolver",
    "BeanDefinition",
    "BeanDefinitionRegistry",
    "CdiScopeMetadataResolver",
    "ConfigurationError",
    "DefinitionError",
    "ScopeBridgeError",
    "ScopeMetadata",
    "ScopeMetadataResolver",
    "ScopedProxyMode",
    "application_scoped",
    "request_scoped",
    "scope",
    "session_scoped",
]
