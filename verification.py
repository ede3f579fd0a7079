"""
Diagnostics for a finished decomposition.

The pipeline itself never checks that its output keeps every dependency or
joins back without loss; these helpers measure both.
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
from models import (
    AttributeSet, FunctionalDependency, NormalizationResult, is_subset
)
from fd_algorithms import FDAlgorithms


@dataclass
class VerificationReport:
    """Coverage, dependency preservation and lossless join of one result"""
    covered_attributes: AttributeSet
    missing_attributes: AttributeSet
    preserved_dependencies: List[FunctionalDependency] = field(default_factory=list)
    lost_dependencies: List[FunctionalDependency] = field(default_factory=list)
    lossless: bool = False

    @property
    def covers_all_attributes(self) -> bool:
        return not self.missing_attributes

    def get_summary(self) -> str:
        summary = f"Covered attributes: {', '.join(self.covered_attributes)}\n"
        if self.missing_attributes:
            summary += f"Missing attributes: {', '.join(self.missing_attributes)}\n"
        summary += f"Preserved dependencies: {len(self.preserved_dependencies)}\n"
        if self.lost_dependencies:
            summary += f"Lost dependencies: {', '.join(str(fd) for fd in self.lost_dependencies)}\n"
        summary += f"Lossless join: {'yes' if self.lossless else 'no'}\n"
        return summary


def attribute_coverage(attributes: Sequence[str],
                       relations: Sequence[Sequence[str]]) -> Tuple[AttributeSet, AttributeSet]:
    """Split attributes into those found in some relation and those in none"""
    covered = tuple(attr for attr in attributes if any(attr in rel for rel in relations))
    missing = tuple(attr for attr in attributes if attr not in covered)
    return covered, missing


def check_dependency_preservation(
        fds: Sequence[FunctionalDependency],
        relations: Sequence[Sequence[str]]
) -> Tuple[List[FunctionalDependency], List[FunctionalDependency]]:
    """
    Split dependencies into (preserved, lost).

    X→Y is preserved when Y follows from X using only the dependencies that
    hold inside single relations.
    """
    preserved = []
    lost = []

    for fd in fds:
        closure = FDAlgorithms.project_closure(fd.determinant, fds, relations)
        if is_subset(fd.dependent, closure):
            preserved.append(fd)
        else:
            lost.append(fd)

    return preserved, lost


def is_lossless_join(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                     relations: Sequence[Sequence[str]]) -> bool:
    """
    Chase test: build one tableau row per relation, equate rows that agree
    on a determinant, and look for a row made only of distinguished symbols
    """
    attributes = tuple(attributes)
    if not relations:
        return False

    # Distinguished symbol for an attribute is 0, subscripted ones are row + 1
    rows = [
        {attr: 0 if attr in rel else i + 1 for attr in attributes}
        for i, rel in enumerate(relations)
    ]
    local_fds = [fd for fd in fds
                 if is_subset(fd.determinant, attributes)]

    changed = True
    while changed:
        changed = False
        for fd in local_fds:
            dependent = [attr for attr in fd.dependent if attr in attributes]
            groups = {}
            for row in rows:
                groups.setdefault(tuple(row[attr] for attr in fd.determinant), []).append(row)

            for group in groups.values():
                if len(group) < 2:
                    continue
                for attr in dependent:
                    symbols = {row[attr] for row in group}
                    if len(symbols) < 2:
                        continue
                    # Rename across the whole column, not only inside the group
                    target = min(symbols)
                    for row in rows:
                        if row[attr] in symbols:
                            row[attr] = target
                    changed = True

    return any(all(value == 0 for value in row.values()) for row in rows)


def verify_result(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                  result: NormalizationResult) -> VerificationReport:
    """Run every diagnostic against the final relations of a result"""
    relations = [rel.attributes for rel in result.final_relations]
    covered, missing = attribute_coverage(attributes, relations)
    if result.is_error:
        return VerificationReport(covered_attributes=covered, missing_attributes=missing)

    preserved, lost = check_dependency_preservation(fds, relations)
    return VerificationReport(
        covered_attributes=covered,
        missing_attributes=missing,
        preserved_dependencies=preserved,
        lost_dependencies=lost,
        lossless=is_lossless_join(attributes, fds, relations),
    )
