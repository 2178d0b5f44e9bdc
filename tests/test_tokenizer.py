from __future__ import annotations

from muks.buffer import Buffer, Line, SyntaxCategory
from muks.syntax import WORD_CAPACITY, classify, classify_buffer, classify_text

N = SyntaxCategory.NORMAL
K = SyntaxCategory.KEYWORD
S = SyntaxCategory.STRING
C = SyntaxCategory.COMMENT
D = SyntaxCategory.NUMBER


def categories(text: str) -> list[SyntaxCategory]:
    return classify_text(text)


def test_keyword_number_and_punctuation() -> None:
    assert categories("int x = 1;") == [K, K, K, N, N, N, N, N, D, N]


def test_line_comment_covers_rest_of_line() -> None:
    assert categories("// comment") == [C] * 10
    assert categories("x; // int") == [N, N, N] + [C] * 6


def test_block_comment_closes_on_same_line() -> None:
    text = "a /* b */ int"

    assert categories(text) == [N, N] + [C] * 7 + [N, K, K, K]


def test_unterminated_block_comment_runs_to_end_of_line() -> None:
    assert categories("/* open") == [C] * 7


def test_string_literals_and_escapes() -> None:
    text = '"a\\"b" int'

    assert categories(text) == [S] * 6 + [N, K, K, K]


def test_single_quote_literal_does_not_close_on_double_quote() -> None:
    assert categories("'\"' if") == [S, S, S, N, K, K]


def test_trailing_backslash_in_string_is_string() -> None:
    assert categories('"ab\\') == [S, S, S, S]


def test_keywords_inside_strings_and_comments_are_not_keywords() -> None:
    assert categories('"int"') == [S] * 5
    assert categories("/*int*/") == [C] * 7


def test_numbers_glued_to_identifiers_stay_normal() -> None:
    assert categories("1a") == [N, N]
    assert categories("2int") == [N] * 4
    assert categories("x1") == [N, N]
    assert categories("42") == [D, D]


def test_identifiers_containing_keywords_are_not_keywords() -> None:
    assert categories("integer") == [N] * 7
    assert categories("int1") == [N] * 4
    assert categories("_if") == [N] * 3


def test_keyword_match_is_case_sensitive() -> None:
    assert categories("Int") == [N, N, N]
    assert categories("while") == [K] * 5


def test_preprocessor_directive_names_are_keywords() -> None:
    assert categories("#include") == [N] + [K] * 7
    assert categories("#define") == [N] + [K] * 6


def test_keyword_directly_before_string_is_recognized() -> None:
    assert categories('return"x"') == [K] * 6 + [S] * 3


def test_long_words_are_capped_without_breaking_the_word() -> None:
    word = "a" * (WORD_CAPACITY + 10)

    assert categories(word + " int") == [N] * len(word) + [N, K, K, K]


def test_classification_is_a_pure_function_of_text() -> None:
    line = Line.from_text('static char *s = "/*"; // 7')

    first = classify(line).classification
    second = classify(line).classification

    assert first == second
    assert len(first) == len(line)


def test_no_state_carries_across_lines() -> None:
    buffer = Buffer.from_lines(["/* start", "int x;"])

    classify_buffer(buffer)

    assert buffer.line_at(0).classification == (C,) * 8
    assert buffer.line_at(1).classification[:3] == (K, K, K)


def test_empty_line() -> None:
    assert categories("") == []
