"""
Unit tests for the design expressions and type system.

Tests response duplication, scope lookups, the root registry and the
type classification predicates the code generator dispatches on.
"""

import pytest

from publicist.design import (
    AttributeExpr,
    NamedAttributeExpr,
    Object,
    Array,
    Map,
    UserTypeExpr,
    MediaTypeExpr,
    HTTPResponseExpr,
    ResourceExpr,
    ActionExpr,
    RootExpr,
    Boolean,
    Int,
    String,
    Bytes,
    Any,
    array_of,
    map_of,
    resolve,
    is_primitive,
    is_object,
    is_array,
    is_map,
    as_object,
    as_array,
    as_map,
    underlying_attribute,
)
from publicist.design.status import STATUS_CODES, NotFound, OK
from publicist.utils.exceptions import UnresolvableReferenceError


class TestHTTPResponseExpr:
    """Test response expressions."""

    def test_dup_copies_scalars(self):
        """Test scalar fields are copied."""
        resp = HTTPResponseExpr(name="Custom", status=201, media_type="text/plain",
                                description="Created", standard=True)

        copy = resp.dup()

        assert copy is not resp
        assert copy.name == "Custom"
        assert copy.status == 201
        assert copy.media_type == "text/plain"
        assert copy.description == "Created"
        assert copy.standard is True
        assert copy.parent is None

    def test_dup_isolates_headers(self):
        """Test headers of the copy are independent of the original."""
        resp = HTTPResponseExpr(name="Custom")
        resp.add_header("X-Request-Id", AttributeExpr(String), required=True)

        copy = resp.dup()
        copy.add_header("Location", AttributeExpr(String))
        copy.header("X-Request-Id").description = "changed"
        copy.headers.required.append("Location")

        assert resp.header_names() == ["X-Request-Id"]
        assert resp.header("X-Request-Id").description == ""
        assert resp.headers.required == ["X-Request-Id"]

    def test_dup_shares_body_type(self):
        """Test the body type is shared, not copied."""
        body = UserTypeExpr("bottle", AttributeExpr(Object()))
        resp = HTTPResponseExpr(name=OK, type=body)

        assert resp.dup().type is body

    def test_dup_status_isolation(self):
        """Test changing the status of a copy keeps the original."""
        resp = HTTPResponseExpr(name=NotFound, status=404)

        copy = resp.dup()
        copy.status = 410

        assert resp.status == 404

    def test_headers_without_definition(self):
        """Test header lookups on a response without headers."""
        resp = HTTPResponseExpr(name=OK)

        assert resp.header("X-Request-Id") is None
        assert resp.header_names() == []

    def test_eval_name(self):
        """Test diagnostic names include the owning scope."""
        res = ResourceExpr(name="bottle")
        act = ActionExpr(name="show", resource=res)
        resp = HTTPResponseExpr(name=OK)

        assert resp.eval_name() == 'response "OK"'
        act.add_response(resp)
        assert resp.eval_name() == 'response "OK" of action "show" of resource "bottle"'


class TestScopes:
    """Test resources and actions."""

    def test_response_lookup(self):
        """Test lookup by name within the scope."""
        res = ResourceExpr(name="bottle")
        ok = HTTPResponseExpr(name=OK)
        res.add_response(ok)

        assert res.response(OK) is ok
        assert res.response(NotFound) is None
        assert ok.parent is res

    def test_action_media_type_fallback(self):
        """Test actions use their resource media type."""
        res = ResourceExpr(name="bottle", media_type="application/vnd.bottle")
        act = ActionExpr(name="show", resource=res)

        assert act.default_media_type() == "application/vnd.bottle"
        assert ActionExpr(name="orphan").default_media_type() == ""

    def test_action_lookup(self):
        """Test actions are found by name."""
        res = ResourceExpr(name="bottle")
        act = ActionExpr(name="show", resource=res)
        res.actions.append(act)

        assert res.action("show") is act
        assert res.action("list") is None


class TestRootExpr:
    """Test the root registry."""

    def test_default_responses(self):
        """Test every standard status has a default response."""
        root = RootExpr()

        assert len(root.default_responses) == len(STATUS_CODES)
        assert root.default_response(NotFound).status == 404
        assert root.default_response(OK).status == 200
        assert root.default_response("Custom") is None

    def test_reset(self):
        """Test reset forgets user definitions."""
        root = RootExpr()
        root.name = "cellar"
        root.add_response(HTTPResponseExpr(name="Custom"))
        root.add_resource(ResourceExpr(name="bottle"))
        root.default_response(NotFound).status = 410

        root.reset()

        assert root.name == ""
        assert root.response("Custom") is None
        assert root.resource("bottle") is None
        assert root.default_response(NotFound).status == 404

    def test_media_types(self):
        """Test media types are registered by identifier."""
        root = RootExpr()
        mt = MediaTypeExpr("bottle", "application/vnd.bottle", AttributeExpr(Object()))

        assert root.add_media_type(mt) is mt
        assert root.media_type("application/vnd.bottle") is mt
        assert root.media_type("text/plain") is None

    def test_eval_name(self):
        """Test the root diagnostic name."""
        root = RootExpr()
        assert root.eval_name() == "API"
        root.name = "cellar"
        assert root.eval_name() == 'API "cellar"'


class TestTypeClassification:
    """Test the type classification predicates."""

    @pytest.mark.parametrize("dt,expected", [
        (Int, "primitive"),
        (String, "primitive"),
        (Object(), "object"),
        (array_of(Int), "array"),
        (map_of(String, Int), "map"),
    ])
    def test_exactly_one_predicate(self, dt, expected):
        """Test each structural type matches exactly one predicate."""
        results = {
            "primitive": is_primitive(dt),
            "object": is_object(dt),
            "array": is_array(dt),
            "map": is_map(dt),
        }
        assert [k for k, v in results.items() if v] == [expected]

    def test_accessors(self):
        """Test accessors return the type or None."""
        obj = Object()
        arr = array_of(Int)
        m = map_of(String, Int)

        assert as_object(obj) is obj
        assert as_array(arr) is arr
        assert as_map(m) is m
        assert as_object(arr) is None
        assert as_array(m) is None
        assert as_map(Int) is None

    def test_user_type_classified_by_target(self, bottle_type):
        """Test user types are classified by the type they name."""
        assert is_object(bottle_type)
        assert as_object(bottle_type) is bottle_type.attribute.type
        assert not is_primitive(bottle_type)

    def test_chained_references(self):
        """Test references to references are resolved."""
        base = UserTypeExpr("base", AttributeExpr(array_of(Int)))
        alias = UserTypeExpr("alias", AttributeExpr(base))
        alias2 = UserTypeExpr("alias2", AttributeExpr(alias))

        assert isinstance(resolve(alias2), Array)
        assert is_array(alias2)

    def test_reference_cycle(self):
        """Test a reference cycle fails instead of looping."""
        a = UserTypeExpr("a")
        b = UserTypeExpr("b", AttributeExpr(a))
        a.attribute = AttributeExpr(b)

        with pytest.raises(UnresolvableReferenceError) as exc_info:
            resolve(a)
        assert "reference cycle" in str(exc_info.value)

    def test_dangling_reference(self):
        """Test a user type without definition fails."""
        with pytest.raises(UnresolvableReferenceError) as exc_info:
            is_object(UserTypeExpr("missing"))
        assert exc_info.value.type_name == "missing"

    def test_recursive_type_through_field(self):
        """Test a type referring to itself through a field resolves."""
        node = UserTypeExpr("node")
        node.attribute = AttributeExpr(Object([
            NamedAttributeExpr("children", AttributeExpr(array_of(node))),
        ]))

        assert is_object(node)
        assert is_object(as_array(as_object(node).attribute("children").type).elem_type.type)

    def test_underlying_attribute(self, bottle_type):
        """Test the underlying attribute carries the required fields."""
        att = underlying_attribute(AttributeExpr(bottle_type))

        assert att is bottle_type.attribute
        assert att.all_required() == ["id", "name"]


class TestAttributeExpr:
    """Test attribute helpers."""

    def test_primitive_pointer(self, bottle_type):
        """Test which fields are pointers in the public struct."""
        att = bottle_type.attribute

        assert not att.is_primitive_pointer("id")
        assert att.is_primitive_pointer("rating")
        assert not att.is_primitive_pointer("vintage")
        assert not att.is_primitive_pointer("unknown")

    def test_reference_types_never_pointers(self):
        """Test bytes and any are never held through a pointer."""
        att = AttributeExpr(Object([
            NamedAttributeExpr("data", AttributeExpr(Bytes)),
            NamedAttributeExpr("extra", AttributeExpr(Any)),
            NamedAttributeExpr("flag", AttributeExpr(Boolean)),
        ]))

        assert not att.is_primitive_pointer("data")
        assert not att.is_primitive_pointer("extra")
        assert att.is_primitive_pointer("flag")

    def test_has_default_value(self, bottle_type):
        """Test default value detection."""
        assert bottle_type.attribute.has_default_value("vintage")
        assert not bottle_type.attribute.has_default_value("rating")

    def test_dup_copies_inline_objects(self):
        """Test dup copies inline objects and shares named types."""
        named = UserTypeExpr("account", AttributeExpr(Object()))
        att = AttributeExpr(Object([
            NamedAttributeExpr("owner", AttributeExpr(named)),
        ]), required=["owner"])

        copy = att.dup()
        copy.type.set("extra", AttributeExpr(Int))
        copy.required.append("extra")

        assert len(att.type) == 1
        assert att.required == ["owner"]
        assert copy.type.attribute("owner").type is named

    def test_object_set_keeps_order(self):
        """Test replacing a field keeps its position."""
        obj = Object()
        obj.set("a", AttributeExpr(Int))
        obj.set("b", AttributeExpr(Int))
        obj.set("a", AttributeExpr(String))

        assert [nat.name for nat in obj] == ["a", "b"]
        assert obj.attribute("a").type is String

    def test_map_types(self):
        """Test map key and element attributes."""
        m = map_of(String, Int)

        assert isinstance(m, Map)
        assert m.key_type.type is String
        assert m.elem_type.type is Int
