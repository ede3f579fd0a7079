"""
Algorithms over functional dependencies: attribute closure and key search
"""
from itertools import combinations
from typing import List, Sequence, Tuple
from models import AttributeSet, FunctionalDependency, is_subset


class FDAlgorithms:
    """Closure and candidate key algorithms"""

    @staticmethod
    def closure(attributes: Sequence[str], fds: Sequence[FunctionalDependency]) -> AttributeSet:
        """
        Compute the closure of an attribute set

        Args:
            attributes: Starting attributes (left untouched)
            fds: Functional dependencies

        Returns:
            Starting attributes followed by every derived attribute, in the
            order they were derived
        """
        closure = list(attributes)
        changed = True

        while changed:
            changed = False
            for fd in fds:
                if is_subset(fd.determinant, closure):
                    new_attrs = [attr for attr in fd.dependent if attr not in closure]
                    if new_attrs:
                        closure.extend(new_attrs)
                        changed = True

        return tuple(closure)

    @staticmethod
    def is_superkey(candidate: Sequence[str], attributes: Sequence[str],
                    fds: Sequence[FunctionalDependency]) -> bool:
        """True if the closure of candidate covers every attribute of the relation"""
        return is_subset(attributes, FDAlgorithms.closure(candidate, fds))

    @staticmethod
    def find_candidate_keys(attributes: Sequence[str],
                            fds: Sequence[FunctionalDependency],
                            provided_keys: Sequence[Sequence[str]] = ()) -> List[AttributeSet]:
        """
        Find candidate keys by dropping one attribute at a time.

        Keys supplied by the caller are returned as they are, without checking
        that they really are keys.

        Only the n subsets that are one attribute short of the full set are
        tried, so the result can contain superkeys that are not minimal and
        miss keys that need two or more attributes removed. find_all_keys()
        does the exhaustive search.

        Returns:
            Keys in the order of the removed attribute's position, or the full
            attribute list when no reduced set is a superkey
        """
        if provided_keys:
            return [tuple(key) for key in provided_keys]

        all_attrs = tuple(attributes)
        candidate_keys = []

        for i in range(len(all_attrs)):
            potential_key = all_attrs[:i] + all_attrs[i + 1:]
            if FDAlgorithms.is_superkey(potential_key, all_attrs, fds):
                candidate_keys.append(potential_key)

        if not candidate_keys:
            return [all_attrs]

        return candidate_keys

    @staticmethod
    def find_all_keys(attributes: Sequence[str],
                      fds: Sequence[FunctionalDependency]) -> List[AttributeSet]:
        """
        Find every minimal key by checking all attribute combinations,
        smallest first
        """
        all_attrs = tuple(attributes)
        keys = []

        for r in range(1, len(all_attrs) + 1):
            for combo in combinations(all_attrs, r):
                if any(is_subset(key, combo) for key in keys):
                    continue
                if FDAlgorithms.is_superkey(combo, all_attrs, fds):
                    keys.append(combo)

        return keys if keys else [all_attrs]

    @staticmethod
    def prime_attributes(candidate_keys: Sequence[Sequence[str]]) -> AttributeSet:
        """Attributes that belong to at least one key, in first-seen order"""
        prime = []
        for key in candidate_keys:
            for attr in key:
                if attr not in prime:
                    prime.append(attr)
        return tuple(prime)

    @staticmethod
    def project_closure(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                        relations: Sequence[Sequence[str]]) -> AttributeSet:
        """
        Closure of attributes under the projections of fds onto each relation,
        computed without materializing the projected dependencies
        """
        result = list(attributes)
        changed = True

        while changed:
            changed = False
            for rel_attrs in relations:
                local = [attr for attr in result if attr in rel_attrs]
                reachable = FDAlgorithms.closure(local, fds)
                for attr in reachable:
                    if attr in rel_attrs and attr not in result:
                        result.append(attr)
                        changed = True

        return tuple(result)

    @staticmethod
    def split_by_key_membership(attributes: Sequence[str],
                                candidate_keys: Sequence[Sequence[str]]) -> Tuple[AttributeSet, AttributeSet]:
        """Split attributes into (prime, non_prime)"""
        prime = FDAlgorithms.prime_attributes(candidate_keys)
        non_prime = tuple(attr for attr in attributes if attr not in prime)
        return tuple(attr for attr in attributes if attr in prime), non_prime
