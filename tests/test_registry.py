import pytest

import scopebridge.resolvers
from scopebridge.annotations import application_scoped, request_scoped, scope, session_scoped
from scopebridge.domain import AnnotatedBeanDefinition, BeanDefinition, ScopeMetadata
from scopebridge.errors import ConfigurationError, DefinitionError
from scopebridge.registry import BeanDefinitionRegistry, inferred_name
from scopebridge.resolvers import (
    AnnotationScopeMetadataResolver,
    CdiScopeMetadataResolver,
    ScopeMetadataResolver,
)


class Service:
    pass


@pytest.fixture
def registry():
    return BeanDefinitionRegistry(CdiScopeMetadataResolver())


@pytest.fixture
def definition_finder(registry):
    def find(name: str) -> BeanDefinition:
        return next(d for d in registry.registered_definitions() if d.name == name)

    return find


def test_class_is_registered_with_its_types(registry, definition_finder):
    @registry.component()
    @request_scoped
    class UserService(Service):
        pass

    definition = definition_finder("UserService")
    assert isinstance(definition, AnnotatedBeanDefinition)
    assert definition.factory is UserService
    assert definition.provided_types == [UserService, Service]


def test_name_can_be_resolved_from_declaring_function_name(registry, definition_finder):
    @registry.component()
    def make_greeter() -> str:
        return "hello"

    assert definition_finder("greeter").provided_types == [str]


def test_function_can_have_no_return_type(registry, definition_finder):
    @registry.component(name="foo")
    def foo():
        pass

    assert definition_finder("foo").provided_types == []


def test_inferred_name():
    def make_database():
        pass

    def my_service():
        pass

    assert inferred_name(Service) == "Service"
    assert inferred_name(make_database) == "database"
    assert inferred_name(my_service) == "my_service"


def test_resolves_scopes_of_registered_components(registry):
    @registry.component()
    @request_scoped
    class Cart:
        pass

    @registry.component()
    @session_scoped
    def make_preferences():
        pass

    @registry.component()
    @application_scoped
    class Catalogue:
        pass

    @registry.component()
    @scope("prototype")
    class Report:
        pass

    @registry.component()
    class Clock:
        pass

    registry.register(BeanDefinition("plain", object))

    assert {name: metadata.scope_name for name, metadata in registry.scopes().items()} == {
        "Cart": "request",
        "preferences": "session",
        "Catalogue": "application",
        "Report": "prototype",
        "Clock": "singleton",
        "plain": "singleton",
    }


def test_resolve_scope_of_unknown_bean(registry):
    with pytest.raises(KeyError):
        registry.resolve_scope("missing")


def test_duplicate_names_are_rejected(registry):
    registry.register(BeanDefinition("foo", object))

    with pytest.raises(DefinitionError, match="already registered"):
        registry.register(BeanDefinition("foo", dict))


def test_only_classes_and_functions_can_be_components(registry):
    with pytest.raises(DefinitionError, match="is not a class or function"):
        registry.component(name="answer")(42)


def test_unnamed_component_must_be_a_class_or_function(registry):
    with pytest.raises(DefinitionError, match="is not a class or function"):
        registry.component()(42)

    assert registry.registered_definitions() == []


def test_default_resolver_ignores_cdi_annotations():
    registry = BeanDefinitionRegistry()

    @registry.component()
    @request_scoped
    class Cart:
        pass

    assert isinstance(registry.scope_resolver, AnnotationScopeMetadataResolver)
    assert registry.resolve_scope("Cart") == ScopeMetadata()


def test_resolver_can_be_configured_by_dotted_path():
    registry = BeanDefinitionRegistry("scopebridge.resolvers.CdiScopeMetadataResolver")

    @registry.component()
    @session_scoped
    class Cart:
        pass

    assert isinstance(registry.scope_resolver, CdiScopeMetadataResolver)
    assert registry.resolve_scope("Cart").scope_name == "session"


@pytest.mark.parametrize(
    "config, message",
    [
        ("CdiScopeMetadataResolver", "not a dotted path"),
        ("scopebridge.nonexistent.Resolver", "Cannot load"),
        ("scopebridge.resolvers.NoSuchResolver", "Cannot load"),
        ("scopebridge.domain.ScopeMetadata", "is not a ScopeMetadataResolver"),
        ("scopebridge.resolvers.SCOPE_ANNOTATIONS", "is not a ScopeMetadataResolver"),
        (CdiScopeMetadataResolver, "must be a resolver instance or a dotted path"),
        (42, "must be a resolver instance or a dotted path"),
    ],
)
def test_invalid_resolver_configuration(config, message):
    with pytest.raises(ConfigurationError, match=message):
        BeanDefinitionRegistry(config)


def test_resolver_needing_arguments_is_a_configuration_error(monkeypatch):
    class TenantResolver(ScopeMetadataResolver):
        def __init__(self, tenant: str):
            self.tenant = tenant

        def resolve(self, definition: BeanDefinition) -> ScopeMetadata:
            return ScopeMetadata()

    monkeypatch.setattr(scopebridge.resolvers, "TenantResolver", TenantResolver, raising=False)

    with pytest.raises(ConfigurationError, match="Cannot instantiate"):
        BeanDefinitionRegistry("scopebridge.resolvers.TenantResolver")
