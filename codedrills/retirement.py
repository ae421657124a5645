"""Retirement date and age under the gradual retirement-age increase."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class RetirementPolicy:
    """The rules for one category of worker."""

    original_age: int
    max_delay: int
    delay_interval: int


class RetirementCategory(enum.Enum):
    """The kinds of worker the policy distinguishes, keyed by their label."""

    MALE = "男职工"
    FEMALE_MANAGERIAL = "原法定退休年龄55周岁女职工"
    FEMALE_ORDINARY = "原法定退休年龄50周岁女职工"

    @classmethod
    def from_label(cls, label: str) -> "RetirementCategory":
        """Return the category named by ``label``; raise ValueError if unknown."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"illegal personnel type: {label!r}") from None

    def policy(self) -> RetirementPolicy:
        """Return the retirement rules that apply to this category."""
        return _POLICIES[self]


_POLICIES = {
    RetirementCategory.MALE: RetirementPolicy(original_age=60, max_delay=36, delay_interval=4),
    RetirementCategory.FEMALE_MANAGERIAL: RetirementPolicy(
        original_age=55, max_delay=36, delay_interval=4
    ),
    RetirementCategory.FEMALE_ORDINARY: RetirementPolicy(
        original_age=50, max_delay=60, delay_interval=2
    ),
}


@dataclass(frozen=True)
class RetirementResult:
    """When someone retires, at what age, and how many months later than before."""

    retirement_date: date
    retirement_age: float
    delay_months: int

    def format(self) -> str:
        """Render as ``YYYY-MM,age,delay``; a fractional age gets two decimals."""
        if float(self.retirement_age).is_integer():
            age = str(int(self.retirement_age))
        else:
            age = f"{self.retirement_age:.2f}"
        stamp = f"{self.retirement_date.year:04d}-{self.retirement_date.month:02d}"
        return f"{stamp},{age},{self.delay_months}"


def _months_between(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def _add_months(day: date, months: int) -> date:
    year, month_index = divmod(day.year * 12 + day.month - 1 + months, 12)
    return date(year, month_index + 1, 1)


@dataclass(frozen=True)
class RetirementCalculator:
    """Applies the policy that takes effect on ``policy_start_date``."""

    policy_start_date: date = field(default_factory=lambda: date(2025, 1, 1))

    def calculate(self, birth_date: date, category: RetirementCategory) -> RetirementResult:
        """Work out the retirement of someone born on ``birth_date``."""
        policy = category.policy()
        original = birth_date.replace(year=birth_date.year + policy.original_age)

        if original < self.policy_start_date:
            return RetirementResult(original, float(policy.original_age), 0)

        if original == self.policy_start_date:
            return RetirementResult(
                original.replace(month=original.month + 1),
                policy.original_age + 1.0 / 12.0,
                1,
            )

        months_after = _months_between(self.policy_start_date, original)
        delay = -(-months_after // policy.delay_interval)
        delay = min(delay, policy.max_delay)
        final = _add_months(original, delay)
        age = _months_between(birth_date, final) / 12.0
        return RetirementResult(final, age, delay)


def retire_time(time: str, tp: str) -> str:
    """Return ``YYYY-MM,age,delay`` for someone born in month ``time`` of category ``tp``."""
    try:
        birth_date = datetime.strptime(f"{time}-01", "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"invalid date format: {time!r}") from None
    category = RetirementCategory.from_label(tp)
    return RetirementCalculator().calculate(birth_date, category).format()