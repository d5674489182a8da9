"""Tests for struct declarations."""

import pytest

from rustgen import Field, FieldsKind, Scope, Struct, Type


class TestNamedStruct:
    """Test structs with named fields."""

    def test_foo_example(self):
        """pub struct with one derive and two named fields."""
        scope = Scope()
        scope.new_struct("Foo").vis("pub").derive("Debug").field(
            "one", "usize"
        ).field("two", "String")

        expect = """\
#[derive(Debug)]
pub struct Foo {
    one: usize,
    two: String,
}"""
        assert scope.render() == expect

    def test_derive_before_header(self):
        scope = Scope()
        scope.new_struct("Foo").vis("pub").derive("Debug").field("one", "usize")
        out = scope.render()
        assert out.index("#[derive(Debug)]") < out.index("pub struct Foo")

    def test_multiple_derives_share_one_marker(self):
        scope = Scope()
        scope.new_struct("Foo").derive("Debug").derive("Clone").derive("Debug")
        assert scope.render().splitlines()[0] == "#[derive(Debug, Clone, Debug)]"

    def test_field_with_docs_and_annotation(self):
        scope = Scope()
        field = Field("name", "String").doc("The name.").annotation(
            '#[serde(rename = "n")]'
        )
        scope.new_struct("Foo").push_field(field)

        expect = """\
struct Foo {
    /// The name.
    #[serde(rename = "n")]
    name: String,
}"""
        assert scope.render() == expect

    def test_type_object_field(self):
        scope = Scope()
        scope.new_struct("Foo").field("items", Type("Vec").generic("u8"))
        assert "    items: Vec<u8>," in scope.render()


class TestStructShapes:
    """Test empty, unit and tuple structs."""

    def test_empty_struct_renders_empty_block(self):
        scope = Scope()
        scope.new_struct("Foo")
        assert scope.render() == "struct Foo {}"

    def test_unit_struct(self):
        scope = Scope()
        scope.new_struct("Foo").unit()
        assert scope.render() == "struct Foo;"

    def test_tuple_struct(self):
        scope = Scope()
        scope.new_struct("Meters").vis("pub").tuple_field("f64").tuple_field("u8")
        assert scope.render() == "pub struct Meters(f64, u8);"

    def test_named_then_tuple_raises(self):
        """A body keeps the kind its first field gave it."""
        struct = Struct("Foo").field("a", "u8")
        with pytest.raises(TypeError):
            struct.tuple_field("u8")
        assert struct.fields.kind is FieldsKind.NAMED

    def test_tuple_then_named_raises(self):
        struct = Struct("Foo").tuple_field("u8")
        with pytest.raises(TypeError):
            struct.field("a", "u8")

    def test_unit_then_field_raises(self):
        struct = Struct("Foo").unit()
        with pytest.raises(TypeError):
            struct.field("a", "u8")


class TestStructHeader:
    """Test docs, attributes, generics and bounds."""

    def test_docs_one_line_per_call(self):
        scope = Scope()
        scope.new_struct("Foo").doc("First.").doc("Second\nThird").unit()
        assert scope.render() == "/// First.\n/// Second\n/// Third\nstruct Foo;"

    def test_attribute_order(self):
        """allow, derive, repr, then free-form attributes."""
        scope = Scope()
        scope.new_struct("Foo").attr("non_exhaustive").repr("C").derive(
            "Copy"
        ).allow("dead_code").macro("#[serde(default)]").unit()

        expect = """\
#[allow(dead_code)]
#[derive(Copy)]
#[repr(C)]
#[non_exhaustive]
#[serde(default)]
struct Foo;"""
        assert scope.render() == expect

    def test_vis_last_call_wins(self):
        scope = Scope()
        scope.new_struct("Foo").vis("pub").vis("pub(crate)").unit()
        assert scope.render() == "pub(crate) struct Foo;"

    def test_generics_with_bounds(self):
        scope = Scope()
        scope.new_struct("Wrapper").generic("T").generic("U", "Clone", "Send").field(
            "a", "T"
        )
        assert scope.render().splitlines()[0] == "struct Wrapper<T, U: Clone + Send> {"

    def test_where_clause(self):
        scope = Scope()
        scope.new_struct("Foo").generic("T").bound("T", "Default").field("a", "T")

        expect = """\
struct Foo<T>
where
    T: Default,
{
    a: T,
}"""
        assert scope.render() == expect

    def test_ty(self):
        struct = Struct("Foo").generic("T", "Clone")
        assert str(struct.ty()) == "Foo<T>"
