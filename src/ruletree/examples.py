"""
Example rule tree: screening job candidates for an interview.

The brief, as given:
    "We need someone with at least 10 years of experience,
    who has contributed to at least 5 open source projects,
    and has worked with C++, or Python.
    If they have a science degree, then 5 years of experience is enough.
    If they know Rust we can pay them 130k, otherwise 90k."

Each criterion is its own atomic rule; build_good_for_interview()
combines them.
"""
from dataclasses import dataclass, field
from typing import List

from ruletree.composite import Composite, Rule


@dataclass
class JobCandidate:
    name: str
    years_of_experience: float
    github_contributions: int
    languages_worked_with: List[str] = field(default_factory=list)
    desired_salary: int = 0
    science_degree: bool = False


@dataclass(frozen=True)
class MinimumYearsOfExperience(Rule):
    min_years: float

    def is_satisfied_by(self, candidate: JobCandidate) -> bool:
        return candidate.years_of_experience >= self.min_years


@dataclass(frozen=True)
class MinimumGithubContributions(Rule):
    min_contributions: int

    def is_satisfied_by(self, candidate: JobCandidate) -> bool:
        return candidate.github_contributions >= self.min_contributions


@dataclass(frozen=True)
class WorkedWithLanguage(Rule):
    language: str

    def is_satisfied_by(self, candidate: JobCandidate) -> bool:
        return self.language in candidate.languages_worked_with


@dataclass(frozen=True)
class MaxDesiredSalary(Rule):
    max_salary: int

    def is_satisfied_by(self, candidate: JobCandidate) -> bool:
        return candidate.desired_salary <= self.max_salary


@dataclass(frozen=True)
class HasScienceDegree(Rule):
    def is_satisfied_by(self, candidate: JobCandidate) -> bool:
        return candidate.science_degree


def build_good_for_interview() -> Composite:
    # Wrapped once so the same leaf is used both directly and inverted
    worked_with_rust = WorkedWithLanguage("Rust").composite()

    satisfies_minimum_requirement = MinimumGithubContributions(5).and_(
        WorkedWithLanguage("C++").or_(WorkedWithLanguage("Python"))
    )

    desires_rust_programmer_salary = worked_with_rust.and_(MaxDesiredSalary(130_000))
    desires_non_rust_programmer_salary = worked_with_rust.invert().and_(MaxDesiredSalary(90_000))
    satisfies_salary_requirement = desires_rust_programmer_salary.or_(desires_non_rust_programmer_salary)

    satisfies_experience_requirement = MinimumYearsOfExperience(10.0).or_(
        MinimumYearsOfExperience(5.0).and_(HasScienceDegree())
    )

    return (
        satisfies_minimum_requirement
        .and_(satisfies_salary_requirement)
        .and_(satisfies_experience_requirement)
    )


def example_candidates() -> List[JobCandidate]:
    candidate_a = JobCandidate(
        name="John",
        years_of_experience=5.0,
        github_contributions=10,
        languages_worked_with=["Rust", "C++", "Python", "Go"],
        desired_salary=100_000,
        science_degree=True,
    )
    candidate_b = JobCandidate(
        name="Mike",
        years_of_experience=5.0,
        github_contributions=10,
        languages_worked_with=["C++", "Python", "Go"],
        desired_salary=100_000,
        science_degree=True,
    )
    return [candidate_a, candidate_b]
