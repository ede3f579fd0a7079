"""
Value types for the relational normalization engine
"""
from typing import Tuple, Optional
from dataclasses import dataclass
from enum import Enum


AttributeSet = Tuple[str, ...]


class NormalForm(Enum):
    """Normal forms produced by the pipeline, in order"""
    FIRST_NF = "1NF"
    SECOND_NF = "2NF"
    THIRD_NF = "3NF"
    BCNF = "BCNF"


ERROR_STEP_NAME = "Error"


def unique_attributes(attributes) -> AttributeSet:
    """Drop repeated attributes, keeping the first occurrence"""
    seen = []
    for attr in attributes:
        if attr not in seen:
            seen.append(attr)
    return tuple(seen)


def is_subset(subset, superset) -> bool:
    """Set-based subset test that ignores order"""
    return all(attr in superset for attr in subset)


@dataclass(frozen=True, eq=False)
class FunctionalDependency:
    """
    Functional dependency determinant → dependent.

    Equality is identity: two dependencies parsed from the same text are
    still different objects. Use same_as() for a structural comparison.
    """
    determinant: AttributeSet
    dependent: AttributeSet

    def __post_init__(self):
        object.__setattr__(self, "determinant", unique_attributes(self.determinant))
        object.__setattr__(self, "dependent", unique_attributes(self.dependent))
        if not self.determinant or not self.dependent:
            raise ValueError(f"Both sides of a functional dependency must be non-empty: "
                             f"{self.determinant} → {self.dependent}")

    def same_as(self, other: "FunctionalDependency") -> bool:
        """Structural equality of both sides"""
        return (set(self.determinant) == set(other.determinant)
                and set(self.dependent) == set(other.dependent))

    def __str__(self):
        return f"{''.join(self.determinant)}→{''.join(self.dependent)}"

    def __repr__(self):
        return f"FunctionalDependency({self})"


@dataclass(frozen=True)
class RelationSchema:
    """Named relation schema, rendered as Name(A, B, C)"""
    name: str
    attributes: AttributeSet

    def __post_init__(self):
        object.__setattr__(self, "attributes", unique_attributes(self.attributes))

    @classmethod
    def for_dependency(cls, fd: FunctionalDependency) -> "RelationSchema":
        """Relation R_<determinant> holding both sides of the dependency"""
        return cls(f"R_{''.join(fd.determinant)}", fd.determinant + fd.dependent)

    def __str__(self):
        return f"{self.name}({', '.join(self.attributes)})"


@dataclass(frozen=True)
class NormalizationStep:
    """One stage of the pipeline"""
    name: str
    relations: Tuple[RelationSchema, ...]
    reasoning: str
    violating_dependencies: Optional[Tuple[FunctionalDependency, ...]] = None
    decomposed_relations: Optional[Tuple[RelationSchema, ...]] = None

    @property
    def is_error(self) -> bool:
        return self.name == ERROR_STEP_NAME

    def __repr__(self):
        rels = ", ".join(str(rel) for rel in self.relations)
        return f"{self.name}: [{rels}]"


@dataclass(frozen=True)
class NormalizationResult:
    """Ordered steps plus the final relation set"""
    steps: Tuple[NormalizationStep, ...]
    final_relations: Tuple[RelationSchema, ...]

    @property
    def is_error(self) -> bool:
        return bool(self.steps) and self.steps[0].is_error

    @property
    def error_message(self) -> Optional[str]:
        if self.is_error:
            return self.steps[0].reasoning
        return None

    def get_step(self, name: str) -> Optional[NormalizationStep]:
        for step in self.steps:
            if step.name == name:
                return step
        return None

    def get_summary(self) -> str:
        """Short human-readable description of the result"""
        if self.is_error:
            return f"Normalization failed: {self.error_message}\n"
        summary = f"Normalization steps: {', '.join(step.name for step in self.steps)}\n"
        summary += f"Final relations: {len(self.final_relations)}\n"
        for rel in self.final_relations:
            summary += f"  - {rel}\n"
        return summary
