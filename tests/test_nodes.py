import pytest

from starsyn.nodes import (
    BinaryExpr,
    BranchStmt,
    CallExpr,
    Comments,
    DictEntry,
    File,
    Ident,
    IfStmt,
    Literal,
    LoadStmt,
    Node,
    ReturnStmt,
    TupleExpr,
    UnaryExpr,
    end,
    start,
)
from starsyn.tokens import Position, Token


def pos(line, col):
    return Position("f.star", line, col)


def ident(name, line=1, col=1):
    return Ident(pos(line, col), name)


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node()


def test_ident_span():
    x = Ident(pos(1, 5), "abc")
    assert x.span() == (pos(1, 5), pos(1, 8))


def test_alloc_comments_is_idempotent():
    x = ident("a")
    assert x.comments is None
    first = x.alloc_comments()
    assert x.comments is first
    assert first == Comments()
    assert x.alloc_comments() is first


def test_comments_are_per_node():
    a, b = ident("a"), ident("b")
    a.alloc_comments()
    assert b.comments is None


def test_binary_span_covers_operands():
    lhs = ident("x", 1, 1)
    rhs = ident("yy", 1, 5)
    e = BinaryExpr(lhs, pos(1, 3), Token.PLUS, rhs)
    assert start(e) == start(lhs)
    assert end(e) == end(rhs)


def test_call_span_ends_after_rparen():
    fn = ident("f")
    call = CallExpr(fn, pos(1, 2), [], pos(1, 3))
    assert call.span() == (start(fn), pos(1, 3).add(")"))


def test_branch_span_covers_keyword():
    b = BranchStmt(Token.PASS, pos(2, 3))
    assert b.span() == (pos(2, 3), pos(2, 3).add("pass"))


def test_return_span_with_and_without_result():
    bare = ReturnStmt(pos(1, 1))
    assert bare.span() == (pos(1, 1), pos(1, 1).add("return"))
    result = ident("v", 1, 8)
    full = ReturnStmt(pos(1, 1), result)
    assert full.span() == (pos(1, 1), end(result))


def test_if_span_prefers_else_branch():
    true_body = [BranchStmt(Token.PASS, pos(2, 3))]
    false_body = [BranchStmt(Token.PASS, pos(4, 3))]
    without_else = IfStmt(pos(1, 1), ident("c", 1, 4), true_body)
    with_else = IfStmt(pos(1, 1), ident("c", 1, 4), true_body, pos(3, 1), false_body)
    assert end(without_else) == end(true_body[0])
    assert end(with_else) == end(false_body[0])
    assert start(with_else) == pos(1, 1)


def test_tuple_span_with_and_without_parens():
    a, b = ident("a", 1, 2), ident("b", 1, 5)
    paren = TupleExpr(pos(1, 1), [a, b], pos(1, 6))
    assert paren.span() == (pos(1, 1), pos(1, 6))
    bare = TupleExpr(Position(), [a, b], Position())
    assert bare.span() == (start(a), end(b))


def test_unary_star_without_operand():
    star = UnaryExpr(pos(1, 7), Token.STAR)
    assert star.span() == (pos(1, 7), pos(1, 7).add("*"))
    x = ident("x", 1, 8)
    neg = UnaryExpr(pos(1, 7), Token.MINUS, x)
    assert end(neg) == end(x)


def test_empty_file_span_is_invalid():
    s, e = File("f.star").span()
    assert not s.is_valid()
    assert not e.is_valid()


def test_file_span_covers_statements():
    first = BranchStmt(Token.PASS, pos(1, 1))
    last = BranchStmt(Token.BREAK, pos(3, 1))
    f = File("f.star", [first, last])
    assert f.span() == (start(first), end(last))


def test_load_module_name_and_span():
    mod = Literal(Token.STRING, pos(1, 6), '"lib.star"', "lib.star")
    load = LoadStmt(pos(1, 1), mod, [ident("a")], [ident("a")], pos(1, 20))
    assert load.module_name() == "lib.star"
    assert load.span() == (pos(1, 1), pos(1, 20))


def test_literal_span_across_lines():
    lit = Literal(Token.STRING, pos(1, 1), '"""a\nbc"""', "a\nbc")
    assert end(lit) == pos(1, 1).add('"""a\nbc"""')
    assert end(lit).line == 2


def test_dict_entry_span():
    k, v = ident("k", 1, 2), ident("v", 1, 5)
    entry = DictEntry(k, pos(1, 3), v)
    assert entry.span() == (start(k), end(v))


def test_nodes_compare_by_identity():
    a = ident("a")
    b = ident("a")
    assert a == a
    assert a != b
    assert len({a, b}) == 2