"""Character sets for O(1) classification.

Classification is ASCII-only: non-ASCII letters and digits are neither
declaration starts nor declaration characters.

Usage:
    from scsstags.scanner.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

import string

# ASCII whitespace (space, tab, newline, carriage return, form feed, vertical tab)
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")
WHITESPACE_CHARS: str = " \t\n\r\f\v"

ALNUM: frozenset[str] = frozenset(string.ascii_letters + string.digits)

# Combinator and selector punctuation kept inside one declaration,
# so that `a.foo > b:hover` is captured as a single clause.
DECLARATION_PUNCTUATION: frozenset[str] = frozenset("_-+>.,:*#")

DECLARATION_CHARS: frozenset[str] = ALNUM | WHITESPACE | DECLARATION_PUNCTUATION

# Declaration terminators
CLAUSE_SEPARATOR = ","
BODY_OPEN = "{"
BODY_CLOSE = "}"

# Lookback pairs
COMMENT_SLASH = "/"
COMMENT_STAR = "*"
ESCAPE = "\\"
