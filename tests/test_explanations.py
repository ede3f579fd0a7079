import pytest

from explanations import FIRST_NF_EXPLANATION, generate_explanation
from parsing import parse_fds


def test_first_nf_is_always_assumed():
    assert generate_explanation("1NF") == FIRST_NF_EXPLANATION
    assert generate_explanation("1NF", parse_fds("A->B")) == FIRST_NF_EXPLANATION


@pytest.mark.parametrize("step, satisfied, remediation", [
    ("2NF", "already in 2NF", "remove partial dependencies"),
    ("3NF", "already in 3NF", "remove transitive dependencies"),
    ("BCNF", "already in BCNF", "every determinant must be a superkey"),
])
def test_variant_depends_on_violations(step, satisfied, remediation):
    assert satisfied in generate_explanation(step, [])
    assert remediation in generate_explanation(step, parse_fds("A->B"))


def test_unknown_step():
    assert generate_explanation("4NF", parse_fds("A->B")) == ""
