"""Tests for impl blocks."""

from rustgen import Function, Impl, Scope, Type


class TestImpl:
    """Test impl rendering."""

    def test_impl_with_macros(self):
        scope = Scope()
        scope.new_struct("Bar").unit()
        imp = scope.new_impl("Bar")
        imp.impl_trait("Foo")
        imp.macro("#[async_trait]")
        imp.macro("#[toby_is_cute]")

        f = imp.new_fn("pet_toby")
        f.set_async(True)
        f.line('println!("petting Toby many times because he is such a good boi");')

        expect = """\
struct Bar;

#[async_trait]
#[toby_is_cute]
impl Foo for Bar {
    async fn pet_toby() {
        println!("petting Toby many times because he is such a good boi");
    }
}"""
        assert scope.render() == expect

    def test_generic_trait_impl(self):
        scope = Scope()
        imp = scope.new_impl("Wrapper").generic("T").target_generic("T")
        imp.impl_trait("Iterator").associated_type("Item", "T")
        imp.new_fn("next").arg_mut_self().ret("Option<Self::Item>").line("self.0.next()")

        expect = """\
impl<T> Iterator for Wrapper<T> {
    type Item = T;

    fn next(&mut self) -> Option<Self::Item> {
        self.0.next()
    }
}"""
        assert scope.render() == expect

    def test_where_clause(self):
        scope = Scope()
        scope.new_impl("Foo").generic("T").target_generic("T").bound("T", "Default")

        expect = """\
impl<T> Foo<T>
where
    T: Default,
{}"""
        assert scope.render() == expect

    def test_empty_impl(self):
        scope = Scope()
        scope.new_impl("Foo")
        assert scope.render() == "impl Foo {}"

    def test_fns_separated_by_blank_line(self):
        scope = Scope()
        imp = scope.new_impl("Counter")
        imp.new_fn("new").vis("pub").ret("Self").line("Self(0)")
        imp.push_fn(Function("get").vis("pub").arg_ref_self().ret("u32").line("self.0"))

        expect = """\
impl Counter {
    pub fn new() -> Self {
        Self(0)
    }

    pub fn get(&self) -> u32 {
        self.0
    }
}"""
        assert scope.render() == expect

    def test_fn_without_body_still_renders_block(self):
        """Outside a trait a bodiless function renders as an empty block."""
        scope = Scope()
        scope.new_impl("Foo").push_fn(Function("f", body=None))
        assert scope.render() == "impl Foo {\n    fn f() {}\n}"

    def test_target_type_not_shared(self):
        """Target generics never leak back into the caller's Type."""
        target = Type("Foo")
        imp = Impl(target).target_generic("T")
        assert str(imp.target) == "Foo<T>"
        assert str(target) == "Foo"

    def test_associate_type_alias(self):
        imp = Impl("Foo").associate_type("Output", "u8")
        assert imp.associated_types[0].ty == "u8"
