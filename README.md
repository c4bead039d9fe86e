# starsyn

Building blocks for tools that read Starlark source: a lexical scanner,
string-literal quoting and unquoting, syntax-tree node types and a
depth-first tree walker. It has no dependencies outside the standard
library.

## Installation

```
pip install starsyn
```

## Scanning

```python
from starsyn.scanner import tokenize

for tv in tokenize("foo.star", "x = 0x1F + 'a\\n'\n"):
    print(tv.token, repr(tv.raw), tv.pos, tv.value)
```

`tokenize(filename, src)` scans the whole input and returns a list of
`TokenValue` records, ending with an `EOF` token. Each record holds the
`token` kind, its `raw` text, its start `pos` and a decoded `value`: an
`int` or `float` for number literals, a `str` for string literals,
`bytes` for bytes literals and `None` otherwise.

`Scanner(filename, src, keep_comments)` gives finer control. `src` may be:

- a `str` or `bytes`;
- a readable file object;
- a `FilePortion(content, first_line, first_col)`, which sets the
  starting line and column;
- `None`, in which case `filename` is read from disk;
- a callable returning one line of input per call, for interactive use.
  There a blank line closes any open blocks.

Call `next_token()` one token at a time, or iterate over `tokens()`,
which stops after `EOF`. Newlines inside brackets are ignored,
indentation is reported as `INDENT` and `OUTDENT` tokens, and the end of
input acts as an implicit newline. With `keep_comments` set, full-line
comments are collected in `line_comments` and end-of-line comments in
`suffix_comments`.

`is_ident_start(c)` and `is_ident(c)` report whether a character may
begin or continue an identifier.

Bad input raises `ParseError`, which carries `pos` and `msg`; its string
form begins with the position, for example
`foo.star:1:1: invalid hex literal`.

## Tokens and positions

`starsyn.tokens` defines:

- `Token`, an integer enum of token kinds. `str(token)` gives its
  display name (`"+"`, `"identifier"`, `"def"`); `token.quoted()` wraps
  punctuation in single quotes.
- `keyword_token(word)`, which returns the keyword token, `Token.ILLEGAL`
  for a reserved word such as `class` or `import`, or `None`.
- `Position(file, line, col)`, with `is_valid()`, `filename`,
  `add(text)` (the position after `text`) and `is_before(other)`.
  Printed, it looks like `foo.star:3:7`.
- `FilePortion` and `ParseError`.

## Quoting

```python
from starsyn.quote import quote, unquote

quote('say "hi"\n', False)        # '"say \\"hi\\"\\n"'
unquote("r'a\\nb'")               # ('a\\nb', False, False)
```

`unquote(quoted)` returns the decoded value, whether the literal was
triple-quoted and whether it was a bytes literal (in which case the value
is `bytes`). It raises `QuoteError`, a `ValueError`, for malformed
literals: unknown escapes, truncated escapes, non-ASCII `\x` or octal
escapes in text strings, and surrogate or out-of-range code points.

`quote(s, as_bytes)` returns a double-quoted literal for a `str` or
`bytes` value, prefixed with `b` when `as_bytes` is true.

## Syntax trees and walking

`starsyn.nodes` defines the statement and expression nodes (`File`,
`DefStmt`, `IfStmt`, `ForStmt`, `LoadStmt`, `CallExpr`,
`Comprehension` and the rest). Every node reports its source extent
through `span()`; `start(node)` and `end(node)` return either side.
`alloc_comments()` attaches a `Comments` record (`before`, `suffix`,
`after`) to a node.

`starsyn.walk.walk(node, f)` visits a tree depth first. It calls `f` on
each node; when `f` returns true it visits the node's children and then
calls `f(None)`, which makes it easy to track depth:

```python
from starsyn.nodes import Ident
from starsyn.walk import walk

names = []

def collect(node):
    if isinstance(node, Ident):
        names.append(node.name)
    return True

walk(tree, collect)
```

## Options

`starsyn.options.FileOptions` is a frozen record of per-file switches:
`allow_set`, `allow_while`, `top_level_control`, `global_reassign`,
`load_binds_globally` and `recursion`. All are off by default.

## What this package does not do

There is no parser: the scanner produces tokens, and syntax trees must be
built from the node classes directly. Nothing here resolves names,
compiles or evaluates programs, and there is no command-line tool.