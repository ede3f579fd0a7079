import pytest

from parsing import (
    is_valid_schema_format, parse_fds, parse_keys, parse_schema, parse_schema_name
)


def test_parse_schema():
    assert parse_schema("R(A, B, C, D)") == ("A", "B", "C", "D")
    assert parse_schema("Employee(Name,Dept)") == ("Name", "Dept")


@pytest.mark.parametrize("schema", ["", "R", "R()", "A, B, C"])
def test_parse_schema_without_attribute_list(schema):
    assert parse_schema(schema) == ()


def test_parse_schema_drops_blanks_and_repeats():
    assert parse_schema("R(A, , B, A)") == ("A", "B")


def test_parse_schema_name():
    assert parse_schema_name(" Orders(A, B)") == "Orders"


@pytest.mark.parametrize("schema, valid", [
    ("R(A, B, C, D)", True),
    ("  R_1x(A,B)  ", False),
    ("Emp_Dept(A_b, C)", True),
    ("R(A, B", False),
    ("R(1, 2)", False),
])
def test_schema_format(schema, valid):
    assert is_valid_schema_format(schema) is valid


def test_parse_fds_accepts_both_arrows():
    fds = parse_fds("A→B, BC->D, E>F")
    assert [str(fd) for fd in fds] == ["A→B", "BC→D", "E→F"]
    assert fds[1].determinant == ("B", "C")


def test_parse_fds_splits_letters_into_attributes():
    fds = parse_fds("AB1 -> CD")
    assert fds[0].determinant == ("A", "B")
    assert fds[0].dependent == ("C", "D")


@pytest.mark.parametrize("text", ["", "A", "A->", "->B", "A->B->C", "1->2"])
def test_parse_fds_drops_malformed_clauses(text):
    assert parse_fds(text) == []


def test_parse_fds_keeps_valid_clauses_next_to_bad_ones():
    assert [str(fd) for fd in parse_fds("A->B, junk, ->C, C->D")] == ["A→B", "C→D"]


def test_parsed_dependencies_are_distinct_objects():
    first, second = parse_fds("A->B, A->B")
    assert first is not second
    assert first != second
    assert first.same_as(second)


def test_parse_keys():
    assert parse_keys("AB, CD") == [("A", "B"), ("C", "D")]
    assert parse_keys("AB, , 12") == [("A", "B")]
    assert parse_keys("") == []
