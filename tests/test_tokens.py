import pytest

from starsyn.tokens import FilePortion, ParseError, Position, Token, keyword_token


def test_token_names_from_source():
    assert Token.PLUS.quoted() == "'+'"
    assert Token.SLASHSLASH_EQ.quoted() == "'//='"
    assert Token.EOF.quoted() == "end of file"
    assert Token.NOT_IN.quoted() == "not in"
    assert Token.NEWLINE.quoted() == "newline"
    assert str(keyword_token("while")) == "while"


def test_quoted_wraps_only_punctuation():
    assert Token.PLUS.quoted() == "'+'"
    assert Token.STARSTAR.quoted() == "'**'"
    assert Token.IDENT.quoted() == "identifier"
    assert Token.AND.quoted() == "and"


@pytest.mark.parametrize("member", list(Token))
def test_quoted_for_all_punctuation_range(member):
    tok = Token(member.value)
    quoted = tok.quoted()
    if Token.PLUS <= tok <= Token.STARSTAR:
        assert quoted == "'" + str(tok) + "'"
    else:
        assert quoted == str(tok)


@pytest.mark.parametrize("member", list(Token))
def test_every_token_has_a_name(member):
    name = str(Token(member.value))
    assert len(name) > 0


@pytest.mark.parametrize(
    "word,tok",
    [("and", Token.AND), ("while", Token.WHILE), ("load", Token.LOAD), ("lambda", Token.LAMBDA)],
)
def test_keyword_token_keywords(word, tok):
    assert keyword_token(word) is tok
    assert str(keyword_token(word)) == word


@pytest.mark.parametrize("word", ["class", "import", "yield", "nonlocal", "as"])
def test_keyword_token_reserved(word):
    assert keyword_token(word) is Token.ILLEGAL


@pytest.mark.parametrize("word", ["assert", "foo", "print", "And"])
def test_keyword_token_identifier(word):
    assert keyword_token(word) is None


def test_position_str_forms():
    assert str(Position("foo.star", 1, 3)) == "foo.star:1:3"
    assert str(Position("foo.star", 1, 0)) == "foo.star:1"
    assert str(Position("foo.star", 0, 0)) == "foo.star"


def test_invalid_position():
    p = Position()
    assert not p.is_valid()
    assert p.filename == "<invalid>"
    assert str(p) == "<invalid>"
    assert Position("f", 1, 1).is_valid()


def test_add_empty_is_identity():
    p = Position("a.star", 3, 5)
    assert p.add("") == p


def test_add_is_associative_over_concatenation():
    p = Position("a.star", 2, 4)
    for a, b in [("ab", "cd"), ("x\ny", "z"), ("\n", "\n"), ("héllo", "\nwörld")]:
        assert p.add(a).add(b) == p.add(a + b)


def test_add_newline_resets_column():
    p = Position("a.star", 7, 9)
    q = p.add("return\n")
    assert q.line == p.line + 1
    assert q.col == 1
    assert q.file == p.file


def test_add_counts_characters_not_bytes():
    p = Position("a.star", 1, 1)
    assert p.add("éclair") == p.add("eclair")


def test_is_before():
    a = Position("f", 1, 5)
    b = Position("f", 2, 1)
    c = Position("f", 1, 6)
    assert a.is_before(b)
    assert not b.is_before(a)
    assert a.is_before(c)
    assert not a.is_before(a)


def test_parse_error_message():
    err = ParseError(Position("foo.star", 1, 1), "invalid hex literal")
    assert str(err) == "foo.star:1:1: invalid hex literal"
    assert err.msg == "invalid hex literal"
    assert err.pos == Position("foo.star", 1, 1)
    with pytest.raises(ParseError) as info:
        raise err
    assert info.value is err


def test_file_portion_defaults_and_fields():
    portion = FilePortion(b"x = 1", 10, 4)
    assert portion.content == b"x = 1"
    assert (portion.first_line, portion.first_col) == (10, 4)
    assert (FilePortion("y").first_line, FilePortion("y").first_col) == (1, 1)