"""Tokenizer and sequence scanner for realm value text.

The realm answers `vm/qeval` queries with a textual encoding of the returned
values, for example:

    (slice[(&(struct{(1 uint64),("g1..." .uverse.address)} pkg.T) *pkg.T)] []*pkg.T)

There is no formal grammar for it, so the scanner only knows about brackets,
parentheses, braces, commas and quoted strings. Anything else is a bare word.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

SEQUENCE_MARKER = "slice["
NIL_SENTINEL = "nil"


class TokenKind(str, Enum):
    """Kinds of tokens produced by the tokenizer."""
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    STRING = "string"
    WORD = "word"


_PUNCTUATION = {kind.value: kind for kind in (
    TokenKind.LPAREN,
    TokenKind.RPAREN,
    TokenKind.LBRACKET,
    TokenKind.RBRACKET,
    TokenKind.LBRACE,
    TokenKind.RBRACE,
    TokenKind.COMMA,
)}


@dataclass(frozen=True)
class Token:
    """
    A single token with its offsets in the source text.

    For STRING tokens `value` is the unquoted content, `start`/`end` still
    cover the quotes.
    """
    kind: TokenKind
    value: str
    start: int
    end: int


def _unquote(raw: str) -> str:
    """
    Resolve the escapes of a quoted string body.

    Covers `\\n`, `\\t`, `\\"`, `\\\\` and `\\uXXXX`. Escapes JSON does not know
    (e.g. `\\x00`) leave the raw text untouched.
    """
    if "\\" not in raw:
        return raw
    try:
        return json.loads(f'"{raw}"', strict=False)
    except ValueError:
        return raw


def tokenize(text: str) -> list[Token]:
    """
    Split value text into tokens.

    Quoted strings honour backslash escapes and an unterminated quote runs to
    the end of the input. Never raises.
    """
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[ch], ch, i, i + 1))
            i += 1
            continue

        if ch == '"':
            start = i
            i += 1
            while i < n and text[i] != '"':
                # An escaped quote does not end the string
                i += 2 if text[i] == "\\" and i + 1 < n else 1
            raw = text[start + 1:min(i, n)]
            # Skip the closing quote if there is one
            i = min(i + 1, n)
            tokens.append(Token(TokenKind.STRING, _unquote(raw), start, i))
            continue

        start = i
        while i < n and not text[i].isspace() and text[i] not in _PUNCTUATION and text[i] != '"':
            i += 1
        tokens.append(Token(TokenKind.WORD, text[start:i], start, i))

    return tokens


def _find_marker(tokens: list[Token], marker: str) -> Optional[int]:
    """Index of the token right after `marker`, or None if it never occurs."""
    word = marker.rstrip("[")
    for idx in range(len(tokens) - 1):
        tok, nxt = tokens[idx], tokens[idx + 1]
        if (
            tok.kind == TokenKind.WORD
            and tok.value.endswith(word)
            and nxt.kind == TokenKind.LBRACKET
            and nxt.start == tok.end
        ):
            return idx + 2
    return None


def find_sequence_body(text: str, marker: str = SEQUENCE_MARKER) -> Optional[str]:
    """
    Return the body of the first sequence in `text`.

    The body is everything strictly between `marker` and the first `]` seen
    while the parenthesis depth is zero. A `]` inside nested parentheses or
    inside a quoted string does not close the sequence.

    Returns:
        The body substring, or None if there is no marker or it is never closed
    """
    tokens = tokenize(text)
    first = _find_marker(tokens, marker)
    if first is None:
        return None

    body_start = tokens[first - 1].end
    depth = 0
    for tok in tokens[first:]:
        if tok.kind == TokenKind.LPAREN:
            depth += 1
        elif tok.kind == TokenKind.RPAREN:
            depth -= 1
        elif tok.kind == TokenKind.RBRACKET and depth == 0:
            return text[body_start:tok.start]

    return None


def is_empty_sequence(text: str, marker: str = SEQUENCE_MARKER) -> bool:
    """
    Check the explicit empty-collection sentinels.

    Either the payload starts with a nil value (`(nil []*pkg.T)`) or the first
    sequence marker is immediately closed (`(slice[] []*pkg.T)`).
    """
    stripped = text.lstrip().lstrip("(").lstrip()
    if stripped.startswith(NIL_SENTINEL):
        return True

    pos = text.find(marker)
    return pos != -1 and text[pos + len(marker):pos + len(marker) + 1] == "]"


def has_nil_sentinel(text: str) -> bool:
    """True if `nil` appears as a bare word, i.e. the value is a nil pointer."""
    return any(
        tok.kind == TokenKind.WORD and tok.value == NIL_SENTINEL
        for tok in tokenize(text)
    )
