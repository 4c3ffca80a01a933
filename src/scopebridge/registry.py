"""Registration of bean definitions and resolution of their scopes."""

import importlib
import inspect
import logging
from typing import Any, Callable, Optional, Union, get_type_hints

from scopebridge.domain import (
    AnnotatedBeanDefinition,
    AnnotationMetadata,
    BeanDefinition,
    ScopeMetadata,
)
from scopebridge.errors import ConfigurationError, DefinitionError
from scopebridge.resolvers import AnnotationScopeMetadataResolver, ScopeMetadataResolver

__all__ = ["BeanDefinitionRegistry", "inferred_name", "load_resolver"]

logger = logging.getLogger(__name__)

ResolverConfig = Union[ScopeMetadataResolver, str, None]
"""A resolver instance, the dotted path of a resolver class, or None for the default."""


def inferred_name(target: Any) -> str:
    """Derive a bean name from a class or function name, removing 'make_' prefix if present.

    Example:
        >>> inferred_name(Database)       # Returns "Database"
        >>> inferred_name(make_database)  # Returns "database"
        >>> inferred_name(my_service)     # Returns "my_service"
    """
    if inspect.isclass(target):
        return target.__name__

    if target.__name__.startswith("make_"):
        return target.__name__[5:]
    else:
        return target.__name__


def load_resolver(config: ResolverConfig) -> ScopeMetadataResolver:
    """Turn resolver configuration into a resolver instance.

    Args:
        config: A resolver, a dotted path such as
            ``"scopebridge.resolvers.CdiScopeMetadataResolver"`` naming a
            resolver class with a no-argument constructor, or None.

    Returns:
        The configured resolver, or an :class:`AnnotationScopeMetadataResolver`
        if ``config`` is None.

    Raises:
        ConfigurationError: If ``config`` is neither a resolver nor a string, or
            the path cannot be imported, does not name a resolver class, or
            names one that cannot be constructed without arguments.
    """
    if config is None:
        return AnnotationScopeMetadataResolver()
    if isinstance(config, ScopeMetadataResolver):
        return config
    if not isinstance(config, str):
        raise ConfigurationError(
            f"Scope resolver {config!r} must be a resolver instance or a dotted path"
        )

    module_name, _, class_name = config.rpartition(".")
    if not module_name:
        raise ConfigurationError(f"Scope resolver {config!r} is not a dotted path")
    try:
        resolver_class = getattr(importlib.import_module(module_name), class_name)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot load scope resolver {config!r}: {e}") from e

    if not (inspect.isclass(resolver_class) and issubclass(resolver_class, ScopeMetadataResolver)):
        raise ConfigurationError(f"{config!r} is not a ScopeMetadataResolver")
    try:
        return resolver_class()
    except TypeError as e:
        raise ConfigurationError(f"Cannot instantiate scope resolver {config!r}: {e}") from e


class BeanDefinitionRegistry:
    """Registry of bean definitions, resolving scopes with a configured resolver.

    Args:
        scope_resolver: See :func:`load_resolver`.

    Example:
        >>> registry = BeanDefinitionRegistry(CdiScopeMetadataResolver())
        >>>
        >>> @registry.component()
        ... @request_scoped
        ... class ShoppingCart:
        ...     pass
        >>>
        >>> registry.resolve_scope("ShoppingCart").scope_name
        'request'
    """

    def __init__(self, scope_resolver: ResolverConfig = None):
        self._definitions: dict[str, BeanDefinition] = {}
        self.scope_resolver = load_resolver(scope_resolver)
        logger.debug("Registry using scope resolver %r", self.scope_resolver)

    def register(self, definition: BeanDefinition):
        """Register a bean definition explicitly.

        Raises:
            DefinitionError: If a definition with the same name is already registered.
        """
        if definition.name in self._definitions:
            raise DefinitionError(f"A bean named {definition.name!r} is already registered")
        self._definitions[definition.name] = definition
        logger.debug("Registered bean definition %r", definition.name)

    def registered_definitions(self) -> list[BeanDefinition]:
        return list(self._definitions.values())

    def component(self, name: Optional[str] = None) -> Callable:
        """Decorator to register a class or function as an annotated bean definition.

        Apply it outermost, so that scope annotations below it are already declared.

        Args:
            name: Optional bean name; defaults to :func:`inferred_name`.

        Returns:
            A decorator that registers its target and returns it unchanged.
        """
        def decorator(obj):
            if inspect.isclass(obj):
                provided_types = [obj] + list(obj.__bases__)
            elif inspect.isfunction(obj):
                return_type = get_type_hints(obj).get("return", None)
                provided_types = [return_type] if return_type is not None else []
            else:
                raise DefinitionError(f"{obj} is not a class or function")

            bean_name = name or inferred_name(obj)
            self.register(
                AnnotatedBeanDefinition(
                    bean_name,
                    obj,
                    provided_types,
                    AnnotationMetadata.introspect(obj),
                )
            )
            return obj

        return decorator

    def resolve_scope(self, name: str) -> ScopeMetadata:
        """Resolve the scope of the named definition.

        Raises:
            KeyError: If no definition has that name.
        """
        return self.scope_resolver.resolve(self._definitions[name])

    def scopes(self) -> dict[str, ScopeMetadata]:
        return {
            name: self.scope_resolver.resolve(definition)
            for name, definition in self._definitions.items()
        }
