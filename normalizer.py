"""
Normalization pipeline: 1NF → 2NF → 3NF → BCNF
"""
from typing import List, Sequence
from models import (
    ERROR_STEP_NAME, FunctionalDependency, NormalForm,
    NormalizationResult, NormalizationStep, RelationSchema
)
from fd_algorithms import FDAlgorithms
from analyzer import NormalFormAnalyzer
from decomposition import Decomposer
from explanations import generate_explanation
from parsing import parse_schema, parse_fds, parse_keys


INVALID_SCHEMA_MESSAGE = "Invalid schema format. Please use the format R(A, B, C, D)."
INVALID_FDS_MESSAGE = (
    "No valid functional dependencies provided. "
    "Please use the format A→B, BC→D or A->B, BC->D."
)


def _error_result(message: str) -> NormalizationResult:
    step = NormalizationStep(name=ERROR_STEP_NAME, relations=(), reasoning=message)
    return NormalizationResult(steps=(step,), final_relations=())


def _stage(name: str, relations: Sequence[RelationSchema],
           violations: List[FunctionalDependency], decompose) -> NormalizationStep:
    """Build one step; decompose() is only called when there are violations"""
    decomposed = tuple(decompose()) if violations else None
    return NormalizationStep(
        name=name,
        relations=tuple(relations),
        reasoning=generate_explanation(name, violations),
        violating_dependencies=tuple(violations),
        decomposed_relations=decomposed,
    )


def normalize_parsed(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                     provided_keys: Sequence[Sequence[str]] = ()) -> NormalizationResult:
    """
    Run the pipeline on parsed input.

    Violations at every stage are computed against the original attributes
    and dependencies. Only the relation list shown as a step's input is
    carried over from the previous step.

    Returns:
        NormalizationResult; invalid input yields a single Error step
        instead of an exception
    """
    attributes = tuple(attributes)
    fds = tuple(fds)

    if not attributes:
        return _error_result(INVALID_SCHEMA_MESSAGE)
    if not fds:
        return _error_result(INVALID_FDS_MESSAGE)

    first_nf = NormalizationStep(
        name=NormalForm.FIRST_NF.value,
        relations=(RelationSchema("R", attributes),),
        reasoning=generate_explanation(NormalForm.FIRST_NF.value),
    )

    candidate_keys = FDAlgorithms.find_candidate_keys(attributes, fds, provided_keys)
    analyzer = NormalFormAnalyzer(attributes, candidate_keys, fds)

    partial_deps = analyzer.find_partial_dependencies()
    second_nf = _stage(
        NormalForm.SECOND_NF.value, first_nf.relations, partial_deps,
        lambda: Decomposer.decompose_to_2nf(partial_deps, attributes, candidate_keys),
    )
    current = second_nf.decomposed_relations or second_nf.relations

    transitive_deps = analyzer.find_transitive_dependencies()
    third_nf = _stage(
        NormalForm.THIRD_NF.value, current, transitive_deps,
        lambda: Decomposer.decompose_to_3nf(transitive_deps, fds),
    )
    current = third_nf.decomposed_relations or third_nf.relations

    bcnf_violations = analyzer.find_bcnf_violations()
    bcnf = _stage(
        NormalForm.BCNF.value, current, bcnf_violations,
        lambda: Decomposer.decompose_to_bcnf(bcnf_violations, attributes, fds),
    )
    current = bcnf.decomposed_relations or bcnf.relations

    return NormalizationResult(
        steps=(first_nf, second_nf, third_nf, bcnf),
        final_relations=tuple(current),
    )


def normalize(schema: str, fd_string: str, keys_string: str = "") -> NormalizationResult:
    """
    Normalize a relation given as text.

    Args:
        schema: Relation schema, e.g. R(A, B, C, D)
        fd_string: Dependencies, e.g. A→B, BC->D
        keys_string: Optional candidate keys, e.g. AB, CD. When given they
            replace key discovery entirely.
    """
    return normalize_parsed(parse_schema(schema), parse_fds(fd_string), parse_keys(keys_string))
