"""
Reasoning text shown for each normalization step
"""
from typing import Sequence
from models import FunctionalDependency, NormalForm


_SATISFIED = {
    NormalForm.SECOND_NF.value: "The relation is already in 2NF as there are no partial dependencies.",
    NormalForm.THIRD_NF.value: "The relation is already in 3NF as there are no transitive dependencies.",
    NormalForm.BCNF.value: "The relation is already in BCNF as all determinants are superkeys.",
}

_REMEDIATION = {
    NormalForm.SECOND_NF.value: (
        "To achieve Second Normal Form (2NF), we need to remove partial dependencies "
        "by decomposing the relation. Partial dependencies occur when a non-prime attribute "
        "depends on part of a candidate key."
    ),
    NormalForm.THIRD_NF.value: (
        "To achieve Third Normal Form (3NF), we need to remove transitive dependencies. "
        "Transitive dependencies occur when a non-prime attribute depends on another non-prime attribute."
    ),
    NormalForm.BCNF.value: (
        "To achieve Boyce-Codd Normal Form (BCNF), every determinant must be a superkey. "
        "We need to decompose relations where this is not the case."
    ),
}

FIRST_NF_EXPLANATION = (
    "First Normal Form (1NF) requires that each attribute contains only atomic (indivisible) values "
    "and there are no repeating groups. For this step, we assume the initial relation satisfies 1NF."
)


def generate_explanation(step: str, violations: Sequence[FunctionalDependency] = ()) -> str:
    """Template text for a step; unknown step names give an empty string"""
    if step == NormalForm.FIRST_NF.value:
        return FIRST_NF_EXPLANATION
    if step not in _SATISFIED:
        return ""
    if not violations:
        return _SATISFIED[step]
    return _REMEDIATION[step]
