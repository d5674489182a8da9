"""Tests for nested code blocks."""

from rustgen import Block, Scope


class TestBlock:
    """Test blocks pushed into function bodies."""

    def test_block_one_line(self):
        scope = Scope()
        block = Block("")
        block.line('println!("Hello, world!");')
        scope.new_fn("hello_world").push_block(block)

        expect = """\
fn hello_world() {
    {
        println!("Hello, world!");
    }
}"""
        assert scope.render() == expect

    def test_block_multiple_lines(self):
        scope = Scope()
        block = Block().line('println!("Hello, world!");').line('println!("from Rust!");')
        scope.new_fn("hello_world").push_block(block)

        expect = """\
fn hello_world() {
    {
        println!("Hello, world!");
        println!("from Rust!");
    }
}"""
        assert scope.render() == expect

    def test_nested_blocks_with_after(self):
        scope = Scope()
        inner = Block("Some(v) =>").line("v").after(",")
        outer = Block("let value = match opt").push_block(inner).line("None => 0,").after(";")
        scope.new_fn("f").push_block(outer).line("value")

        expect = """\
fn f() {
    let value = match opt {
        Some(v) => {
            v
        },
        None => 0,
    };
    value
}"""
        assert scope.render() == expect

    def test_empty_block(self):
        scope = Scope()
        scope.new_fn("spin").push_block(Block("loop"))
        assert scope.render() == "fn spin() {\n    loop {}\n}"

    def test_non_string_lines(self):
        """Lines are converted with str()."""
        block = Block().line(42)
        assert block.body == ["42"]
