"""
Detection of 2NF, 3NF and BCNF violations
"""
from typing import List, Sequence, Tuple
from models import AttributeSet, FunctionalDependency, is_subset
from fd_algorithms import FDAlgorithms


class NormalFormAnalyzer:
    """Classifies dependencies of one relation against its candidate keys"""

    def __init__(self, attributes: Sequence[str], candidate_keys: Sequence[Sequence[str]],
                 fds: Sequence[FunctionalDependency]):
        self.attributes: AttributeSet = tuple(attributes)
        self.candidate_keys: List[AttributeSet] = [tuple(key) for key in candidate_keys]
        self.fds: Tuple[FunctionalDependency, ...] = tuple(fds)
        # Keys supplied by the caller may name attributes outside the schema;
        # they still count as prime.
        self.prime_attributes = FDAlgorithms.prime_attributes(self.candidate_keys)
        _, self.non_prime_attributes = FDAlgorithms.split_by_key_membership(
            self.attributes, self.candidate_keys)

    def find_partial_dependencies(self) -> List[FunctionalDependency]:
        """
        Dependencies whose determinant is a proper part of a candidate key
        and whose dependent leaves that key (2NF violations)
        """
        partial_deps = []

        for fd in self.fds:
            for key in self.candidate_keys:
                if (is_subset(fd.determinant, key)
                        and len(fd.determinant) < len(key)
                        and not is_subset(fd.dependent, key)):
                    partial_deps.append(fd)
                    break

        return partial_deps

    def find_transitive_dependencies(self) -> List[FunctionalDependency]:
        """
        Dependencies reached through another dependency that starts from a
        prime attribute (3NF violations).

        A dependency is listed once for every dependency it is reached
        through, so the result may hold repeats.
        """
        transitive_deps = []
        prime = self.prime_attributes

        for fd1 in self.fds:
            if not any(attr in prime for attr in fd1.determinant):
                continue

            for fd2 in self.fds:
                if (fd1 is not fd2
                        and is_subset(fd2.determinant, fd1.dependent)
                        and not is_subset(fd2.dependent, fd1.dependent)
                        and not is_subset(fd2.dependent, prime)):
                    transitive_deps.append(fd2)

        return transitive_deps

    def find_bcnf_violations(self) -> List[FunctionalDependency]:
        """Dependencies whose determinant is not a superkey of the relation"""
        return [fd for fd in self.fds
                if not FDAlgorithms.is_superkey(fd.determinant, self.attributes, self.fds)]

    def get_analysis_report(self) -> str:
        """Plain text overview of keys and violations"""
        report = f"Attributes: {', '.join(self.attributes)}\n"
        report += f"Functional dependencies ({len(self.fds)}):\n"
        for fd in self.fds:
            report += f"  - {fd}\n"

        report += f"Candidate keys ({len(self.candidate_keys)}):\n"
        for key in self.candidate_keys:
            report += f"  - {''.join(key)}\n"

        report += f"Prime attributes: {{{', '.join(self.prime_attributes)}}}\n"
        report += f"Non-prime attributes: {{{', '.join(self.non_prime_attributes)}}}\n"

        checks = [
            ("Partial dependencies", self.find_partial_dependencies()),
            ("Transitive dependencies", self.find_transitive_dependencies()),
            ("BCNF violations", self.find_bcnf_violations()),
        ]
        for title, deps in checks:
            listed = ", ".join(str(fd) for fd in deps) if deps else "none"
            report += f"{title}: {listed}\n"

        return report
