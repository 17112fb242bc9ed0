import csv

import pytest

from examplekit.csvtools import (
    csv_to_markdown,
    fixed_length_before,
    get_head,
    load_csv,
    load_csv_from_file,
    load_csv_from_string,
    write_csv,
)

USERDATA = """id;name;email
0;John Doe;john.doe@example.com
1;Jane Doe;jane.doe@example.com
2;Max Mustermann;max@example.com"""


def test_load_csv_from_string_header_and_rows():
    data, head = load_csv_from_string(USERDATA)
    assert set(head) == {"id", "name", "email"}
    assert data[1] == ["0", "John Doe", "john.doe@example.com"]
    names = [data[row][head["name"]] for row in sorted(data)]
    assert names == ["John Doe", "Jane Doe", "Max Mustermann"]


def test_load_csv_from_file_matches_string(tmp_path):
    path = tmp_path / "users.csv"
    path.write_text(USERDATA, encoding="utf-8")
    assert load_csv_from_file(path) == load_csv_from_string(USERDATA)


def test_load_csv_reader_skips_blank_lines():
    data, head = load_csv(iter(["a;b", "", "1;2"]))
    assert list(data.values()) == [["1", "2"]]
    assert head["b"] > head["a"]


def test_load_csv_empty_input():
    assert load_csv_from_string("") == ({}, {})


def test_get_head_last_position_wins():
    assert get_head(["a", "b", "a"]) == {"a": 2, "b": 1}


@pytest.mark.parametrize("text,length", [("ab", 5), ("abc", 3), ("abcdef", 4), ("", 2)])
def test_fixed_length_before_invariants(text, length):
    result = fixed_length_before(text, " ", length)
    assert len(result) == length
    if len(text) <= length:
        assert result.lstrip(" ") == text.lstrip(" ")
        assert result.endswith(text)
    else:
        assert result == text[:length]


def test_fixed_length_before_uses_first_spacer_char():
    assert fixed_length_before("x", "*#", 3) == "**x"


def test_fixed_length_before_errors():
    with pytest.raises(ValueError):
        fixed_length_before("x", "", 3)
    with pytest.raises(ValueError):
        fixed_length_before("x", " ", -1)


def test_csv_to_markdown(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("name;age\nAnn;7\nBartholomew;42\n", encoding="utf-8")
    result = csv_to_markdown(path)
    assert result == (
        "       name|age\n"
        "-----------|---\n"
        "        Ann|  7\n"
        "Bartholomew| 42\n"
    )


def test_csv_to_markdown_lines_align(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("a;bb;c\nlong value;x;yz\n", encoding="utf-8")
    lines = csv_to_markdown(path).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert set(lines[1]) <= {"-", "|"}


def test_write_csv_round_trip(tmp_path):
    rows = [
        ["Language", "Version", "Date"],
        ["Java", "1.19", "2022-08-02"],
        ["Go", "Paris", "2022-09-22"],
        ["with, comma", 'quote "q"', "plain"],
    ]
    path = tmp_path / "languages.csv"
    write_csv(path, rows)
    text = path.read_text(encoding="utf-8")
    assert "\r" not in text
    with open(path, newline="", encoding="utf-8") as fh:
        assert list(csv.reader(fh)) == rows