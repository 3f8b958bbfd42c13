"""Roles, grades and grade ranking.

Role and Grade are closed enumerations assigned at authentication time and
immutable for the session.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Coarse job-function classification."""

    SYSTEM_ADMIN = "SYSTEM_ADMIN"
    ORG_ADMIN = "ORG_ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    GUEST = "GUEST"


class Grade(str, Enum):
    """Seniority classification, orthogonal to Role."""

    EXECUTIVE = "EXECUTIVE"
    TEAM_LEAD = "TEAM_LEAD"
    SENIOR = "SENIOR"
    JUNIOR = "JUNIOR"
    INTERN = "INTERN"


# Higher rank = more senior
GRADE_RANK: dict[Grade, int] = {
    Grade.EXECUTIVE: 5,
    Grade.TEAM_LEAD: 4,
    Grade.SENIOR: 3,
    Grade.JUNIOR: 2,
    Grade.INTERN: 1,
}


def grade_rank(grade: Optional[Grade]) -> int:
    """Rank of ``grade``; 0 when no grade is assigned."""
    return GRADE_RANK[grade] if grade is not None else 0


def compare_grades(first: Optional[Grade], second: Optional[Grade]) -> int:
    """Positive if ``first`` outranks ``second``, negative if lower, 0 if equal."""
    return grade_rank(first) - grade_rank(second)


def meets_minimum_grade(grade: Optional[Grade], minimum: Grade) -> bool:
    """Check that ``grade`` is at least ``minimum``. No grade never qualifies."""
    if grade is None:
        return False
    return GRADE_RANK[grade] >= GRADE_RANK[minimum]


def grades_by_rank() -> list[Grade]:
    """All grades, most senior first."""
    return sorted(Grade, key=lambda g: GRADE_RANK[g], reverse=True)


__all__ = [
    "GRADE_RANK",
    "Grade",
    "Role",
    "compare_grades",
    "grade_rank",
    "grades_by_rank",
    "meets_minimum_grade",
]
