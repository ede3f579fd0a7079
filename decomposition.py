"""
Decomposition of a relation into new schemas for each normal form
"""
from typing import List, Sequence
from models import FunctionalDependency, RelationSchema, unique_attributes
from fd_algorithms import FDAlgorithms


class Decomposer:
    """Turns violating dependencies into relation schemas"""

    @staticmethod
    def decompose_to_2nf(violations: Sequence[FunctionalDependency],
                         attributes: Sequence[str],
                         candidate_keys: Sequence[Sequence[str]]) -> List[RelationSchema]:
        """
        One relation per partial dependency, plus R_main built from the first
        candidate key and every attribute no partial dependency touches.
        R_main is only added when such attributes exist.
        """
        decomposed = [RelationSchema.for_dependency(fd) for fd in violations]

        used_attrs = set()
        for fd in violations:
            used_attrs.update(fd.determinant)
            used_attrs.update(fd.dependent)

        remaining_attrs = [attr for attr in attributes if attr not in used_attrs]
        if remaining_attrs:
            key = tuple(candidate_keys[0])
            decomposed.append(RelationSchema("R_main", unique_attributes(key + tuple(remaining_attrs))))

        return decomposed

    @staticmethod
    def decompose_to_3nf(violations: Sequence[FunctionalDependency],
                         fds: Sequence[FunctionalDependency]) -> List[RelationSchema]:
        """
        One relation per transitive dependency, then one per remaining
        dependency. Remaining means not the same object as any violation.
        """
        decomposed = [RelationSchema.for_dependency(fd) for fd in violations]

        remaining_fds = [fd for fd in fds if not any(fd is dep for dep in violations)]
        decomposed.extend(RelationSchema.for_dependency(fd) for fd in remaining_fds)

        return Decomposer._deduplicate(decomposed)

    @staticmethod
    def decompose_to_bcnf(violations: Sequence[FunctionalDependency],
                          attributes: Sequence[str],
                          fds: Sequence[FunctionalDependency]) -> List[RelationSchema]:
        """
        For each violation, R_rest with the determinant and everything outside
        its closure, followed by the relation of the violation itself
        """
        decomposed = []

        for violation in violations:
            closure = FDAlgorithms.closure(violation.determinant, fds)
            rest_attrs = [attr for attr in attributes
                          if attr not in closure or attr in violation.determinant]
            if rest_attrs:
                decomposed.append(RelationSchema("R_rest", tuple(rest_attrs)))

            decomposed.append(RelationSchema.for_dependency(violation))

        return Decomposer._deduplicate(decomposed)

    @staticmethod
    def _deduplicate(relations: Sequence[RelationSchema]) -> List[RelationSchema]:
        """Drop relations rendering the same as an earlier one"""
        seen = set()
        unique = []
        for rel in relations:
            rendered = str(rel)
            if rendered not in seen:
                seen.add(rendered)
                unique.append(rel)
        return unique
