import math

import pytest

from wordread.words import Word, WordConversionError, read_words, split_words


@pytest.mark.parametrize(
    "text",
    [
        "alpha beta gamma",
        "  leading and trailing  ",
        "one\ntwo\n\nthree",
        "tabs\there\t\tand there",
        "windows\r\nline\r\nendings",
        "x",
    ],
)
def test_split_words_texts_match_whitespace_split(text):
    assert [word.text for word in split_words(text)] == text.split()


@pytest.mark.parametrize("text", ["", " ", "\n\n", " \t\r\n "])
def test_split_words_empty_or_blank_gives_nothing(text):
    assert split_words(text) == []


def test_first_word_starts_at_line_one_column_one():
    assert split_words("hello") == [Word("hello", 1, 1)]


def test_space_advances_column():
    words = split_words("a b")
    assert [word.column for word in words] == [1, 3]
    assert all(word.line == 1 for word in words)


def test_tab_advances_column_by_four():
    assert split_words("\tx")[0].column == 5


def test_newline_resets_column_and_advances_line():
    second = split_words("ab\ncd")[1]
    assert (second.line, second.column) == (2, 1)


def test_carriage_return_does_not_move_column():
    assert split_words("a\r\nb")[1] == Word("b", 2, 1)
    assert split_words("a\rb")[1].column == split_words("ab c")[0].column + 1


def test_positions_are_ordered():
    words = split_words("first second\n third\tfourth\n\nfifth sixth")
    positions = [(word.line, word.column) for word in words]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)


def test_word_length_is_text_length():
    words = split_words("hello  worlds")
    assert [len(word) for word in words] == [len("hello"), len("worlds")]


@pytest.mark.parametrize("text, expected", [("42", 42), ("-7", -7), ("+5", 5), ("0", 0)])
def test_to_int_accepts_whole_integers(text, expected):
    assert Word(text, 1, 1).to_int() == expected


@pytest.mark.parametrize("text", ["4x", "1.5", "abc", "", "+", "1_000"])
def test_to_int_rejects_other_words(text):
    with pytest.raises(WordConversionError):
        Word(text, 1, 1).to_int()


@pytest.mark.parametrize(
    "text, expected", [("3.25", 3.25), ("1e3", 1e3), ("-0.5", -0.5), ("10", 10.0), (".5", 0.5)]
)
def test_to_double_accepts_decimal_numbers(text, expected):
    assert Word(text, 1, 1).to_double() == expected


def test_to_double_accepts_hex_float():
    assert Word("0x1.8p1", 1, 1).to_double() == 3.0


def test_to_double_special_values():
    assert math.isinf(Word("inf", 1, 1).to_double())
    assert Word("-Infinity", 1, 1).to_double() < 0
    assert math.isnan(Word("nan", 1, 1).to_double())


@pytest.mark.parametrize("text", ["1e", "abc", "1_000", "1.2.3", "0x", "--1"])
def test_to_double_rejects_other_words(text):
    with pytest.raises(WordConversionError):
        Word(text, 1, 1).to_double()


def test_conversion_error_is_value_error_with_position():
    word = Word("4x", 3, 7)
    with pytest.raises(ValueError) as info:
        word.to_int()
    assert info.value.word is word
    assert "4x" in str(info.value)
    assert "3:7" in str(info.value)


def test_read_words_matches_split_words(tmp_path):
    content = "1.5 2.5\n\t-3 word\r\nlast"
    path = tmp_path / "input.txt"
    path.write_bytes(content.encode("utf-8"))
    assert read_words(path) == split_words(content)


def test_read_words_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


def test_read_words_values_convert(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1.5 2.5\n-3\n", encoding="utf-8")
    assert [word.to_double() for word in read_words(path)] == [1.5, 2.5, -3.0]