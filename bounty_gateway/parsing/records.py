"""Split a sequence body into records and records into field fragments."""

from .scanner import TokenKind, tokenize

RECORD_MARKER = "struct{"


def split_records(body: str, marker: str = RECORD_MARKER) -> list[str]:
    """
    Split a sequence body into raw records.

    Every top-level `struct{` starts a record that runs until the next
    top-level marker or the end of the body. Text before the first marker is
    wrapper noise and is dropped. A struct nested inside another record's
    fields stays part of that record.
    """
    word = marker.rstrip("{")
    tokens = tokenize(body)
    starts: list[int] = []
    brace_depth = 0

    for idx, tok in enumerate(tokens):
        if tok.kind == TokenKind.LBRACE:
            prev = tokens[idx - 1] if idx > 0 else None
            if (
                brace_depth == 0
                and prev is not None
                and prev.kind == TokenKind.WORD
                and prev.value.endswith(word)
                and prev.end == tok.start
            ):
                starts.append(tok.end)
            brace_depth += 1
        elif tok.kind == TokenKind.RBRACE:
            brace_depth = max(brace_depth - 1, 0)

    records: list[str] = []
    for i, start in enumerate(starts):
        if i + 1 < len(starts):
            # Cut right before the next "struct{" marker
            end = starts[i + 1] - len(marker)
        else:
            end = len(body)
        records.append(body[start:end])
    return records


def split_fields(record: str) -> list[str]:
    """
    Split a raw record into its positional field fragments.

    Fields are the top-level parenthesized groups before the closing `}` of
    the struct, returned without their enclosing parentheses:

        (1 uint64),("g1..." .uverse.address)} pkg.T
        -> ["1 uint64", '"g1..." .uverse.address']
    """
    fields: list[str] = []
    depth = 0
    field_start = 0

    for tok in tokenize(record):
        if tok.kind == TokenKind.LPAREN:
            if depth == 0:
                field_start = tok.end
            depth += 1
        elif tok.kind == TokenKind.RPAREN:
            depth -= 1
            if depth == 0:
                fields.append(record[field_start:tok.start].strip())
            elif depth < 0:
                break
        elif tok.kind == TokenKind.RBRACE and depth == 0:
            break

    return fields
