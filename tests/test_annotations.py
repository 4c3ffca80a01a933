from scopebridge.annotations import (
    REQUEST_SCOPED,
    SCOPE,
    SESSION_SCOPED,
    declared_annotations,
    request_scoped,
    scope,
    session_scoped,
)
from scopebridge.domain import AnnotationMetadata
from scopebridge.scopes import ScopedProxyMode


def test_decorators_return_their_target():
    class Cart:
        pass

    assert request_scoped(Cart) is Cart
    assert scope("prototype")(Cart) is Cart


def test_annotations_are_collected_into_metadata():
    @session_scoped
    @scope("prototype", ScopedProxyMode.INTERFACES)
    def make_cart():
        pass

    metadata = AnnotationMetadata.introspect(make_cart)

    assert metadata.annotation_types == frozenset({SESSION_SCOPED, SCOPE})
    assert metadata.annotation_attributes(SESSION_SCOPED) == {}
    assert metadata.annotation_attributes(SCOPE) == {
        "value": "prototype",
        "proxy_mode": ScopedProxyMode.INTERFACES,
    }
    assert metadata.annotation_attributes(REQUEST_SCOPED) is None


def test_unannotated_target_has_empty_metadata():
    class Plain:
        pass

    assert AnnotationMetadata.introspect(Plain) == AnnotationMetadata()


def test_subclasses_do_not_inherit_annotations():
    @request_scoped
    class Base:
        pass

    @session_scoped
    class Derived(Base):
        pass

    assert declared_annotations(Base) == {REQUEST_SCOPED: {}}
    assert declared_annotations(Derived) == {SESSION_SCOPED: {}}


def test_redeclaring_replaces_attributes():
    @scope("request")
    @scope("prototype")
    class Cart:
        pass

    assert declared_annotations(Cart)[SCOPE]["value"] == "request"


def test_annotation_attributes_cannot_be_changed_through_metadata():
    @scope("prototype")
    class Report:
        pass

    metadata = AnnotationMetadata.introspect(Report)
    metadata.annotation_attributes(SCOPE)["value"] = "request"

    assert metadata.annotation_attributes(SCOPE)["value"] == "prototype"
