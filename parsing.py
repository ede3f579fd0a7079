"""
Text adapters: relation schema, functional dependency and key strings
"""
import re
from typing import List
from models import AttributeSet, FunctionalDependency, unique_attributes


SCHEMA_FORMAT = re.compile(r"^[A-Za-z_]+\([A-Za-z_,\s]+\)$")
_ATTRIBUTE_LIST = re.compile(r"\(([^)]+)\)")
_ARROW = re.compile(r"→|->|>")


def _letters(text: str) -> AttributeSet:
    """Every letter becomes its own attribute"""
    return unique_attributes(ch for ch in text if ch.isascii() and ch.isalpha())


def is_valid_schema_format(schema: str) -> bool:
    """Check the Name(A, B, C) shape before normalizing"""
    return bool(SCHEMA_FORMAT.match(schema.strip()))


def parse_schema_name(schema: str) -> str:
    """Relation name in front of the parentheses"""
    return schema.split("(", 1)[0].strip()


def parse_schema(schema: str) -> AttributeSet:
    """
    Attributes of a Name(A, B, C) string.

    Returns an empty tuple when there is no parenthesized list.
    """
    match = _ATTRIBUTE_LIST.search(schema or "")
    if not match:
        return ()

    attrs = [attr.strip() for attr in match.group(1).split(",")]
    return unique_attributes(attr for attr in attrs if attr)


def parse_fds(fd_string: str) -> List[FunctionalDependency]:
    """
    Comma separated A→B, BC->D clauses.

    Clauses that do not split into two sides, or leave a side without
    letters, are dropped.
    """
    if not fd_string:
        return []

    fds = []
    for clause in fd_string.split(","):
        parts = _ARROW.split(clause.strip())
        if len(parts) != 2:
            continue

        determinant = _letters(parts[0])
        dependent = _letters(parts[1])
        if determinant and dependent:
            fds.append(FunctionalDependency(determinant, dependent))

    return fds


def parse_keys(keys_string: str) -> List[AttributeSet]:
    """Comma separated groups of single-letter attributes, e.g. AB, CD"""
    if not keys_string:
        return []

    keys = [_letters(group) for group in keys_string.split(",")]
    return [key for key in keys if key]
