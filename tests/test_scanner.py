from bounty_gateway.parsing import (
    TokenKind,
    find_sequence_body,
    has_nil_sentinel,
    is_empty_sequence,
    split_fields,
    split_records,
    tokenize,
)

from realm_samples import (
    ALICE,
    BOB,
    EMPTY_APPLICATIONS,
    NIL_APPLICATIONS,
    NIL_BOUNTY,
    BOUNTY_1,
    application,
    applications,
)


def test_tokenize_kinds_and_offsets():
    text = '(slice[("a]b" x),7] T)'
    tokens = tokenize(text)
    kinds = [t.kind for t in tokens]
    assert kinds == [
        TokenKind.LPAREN, TokenKind.WORD, TokenKind.LBRACKET,
        TokenKind.LPAREN, TokenKind.STRING, TokenKind.WORD, TokenKind.RPAREN,
        TokenKind.COMMA, TokenKind.WORD, TokenKind.RBRACKET,
        TokenKind.WORD, TokenKind.RPAREN,
    ]
    string_tok = tokens[4]
    assert string_tok.value == "a]b"
    assert text[string_tok.start:string_tok.end] == '"a]b"'


def test_tokenize_escapes_and_unterminated_quote():
    tokens = tokenize(r'("say \"hi\"" string) "open')
    strings = [t.value for t in tokens if t.kind == TokenKind.STRING]
    assert strings == ['say "hi"', "open"]


def test_sequence_body_ignores_close_bracket_inside_parens():
    body = "(x ]),(y (]) z)"
    text = f"(slice[{body}] []T)"
    assert find_sequence_body(text) == body


def test_sequence_body_ignores_close_bracket_inside_strings():
    body = '("a]b" string)'
    assert find_sequence_body(f"(slice[{body}] []string)") == body


def test_sequence_body_with_leading_noise():
    assert find_sequence_body("result: (slice[(1 int)] []int) trailing") == "(1 int)"


def test_sequence_body_missing_marker_or_close():
    assert find_sequence_body("(3 uint64)") is None
    assert find_sequence_body("(slice[(1 int)") is None


def test_empty_sentinels():
    assert is_empty_sequence(EMPTY_APPLICATIONS)
    assert is_empty_sequence(NIL_APPLICATIONS)
    assert is_empty_sequence("  (nil)")
    assert not is_empty_sequence(applications(application(1, ALICE, "https://pr", 0)))
    assert not is_empty_sequence("(3 uint64)")


def test_nil_sentinel_is_a_bare_word():
    assert has_nil_sentinel(NIL_BOUNTY)
    assert not has_nil_sentinel(BOUNTY_1)
    assert not has_nil_sentinel('(&(struct{("vanilla nil" string)} T) *T)')


def test_split_records_drops_leading_noise():
    body = find_sequence_body(applications(
        application(1, ALICE, "https://pr/1", 0),
        application(2, BOB, "https://pr/2", 1),
    ))
    records = split_records(body)
    assert len(records) == 2
    assert records[0].startswith("(1 uint64)")
    assert records[1].startswith("(2 uint64)")


def test_split_records_keeps_nested_structs_inside_record():
    body = "(struct{(1 int),(struct{(9 int)} Inner)} Outer),(struct{(2 int)} Outer)"
    records = split_records(body)
    assert len(records) == 2
    assert split_fields(records[0]) == ["1 int", "struct{(9 int)} Inner"]
    assert split_fields(records[1]) == ["2 int"]


def test_split_fields_trims_structural_parens():
    record = split_records(find_sequence_body(applications(
        application(4, ALICE, "https://pr/4", 2),
    )))[0]
    fields = split_fields(record)
    assert fields[0] == "4 uint64"
    assert fields[2] == f'"{ALICE}" .uverse.address'
    assert fields[4] == "ref(0a1b2c:9) time.Time"
    assert fields[5].startswith("2 gno.land/")
    assert len(fields) == 7


def test_split_fields_blank_field():
    assert split_fields("(1 int),( .uverse.address)} T") == ["1 int", ".uverse.address"]


def test_tokenize_resolves_string_escapes():
    text = r'("line1\nline2\tend" string),("caf\u00e9" string),("back\\slash" string)'
    strings = [t for t in tokenize(text) if t.kind == TokenKind.STRING]
    assert [t.value for t in strings] == ["line1\nline2\tend", "café", "back\\slash"]
    assert text[strings[1].start:strings[1].end] == r'"caf\u00e9"'


def test_tokenize_keeps_raw_text_for_unknown_escapes():
    strings = [t.value for t in tokenize(r'("nul \x00" string)') if t.kind == TokenKind.STRING]
    assert strings == [r"nul \x00"]
