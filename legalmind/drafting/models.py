from dataclasses import dataclass
from enum import Enum

from legalmind.drafting.exceptions import InvalidFilingTypeError


class FilingType(str, Enum):
    """Filings the drafter can produce, valued by their court-form titles."""

    CIVIL_APPEAL = "民事上訴狀"
    CRIMINAL_APPEAL = "刑事上訴狀"
    DEFENSE_BRIEF = "答辯狀"
    COMPLAINT = "起訴狀"

    @classmethod
    def parse(cls, value: "FilingType | str") -> "FilingType":
        """Accept a member, its title (``民事上訴狀``) or its name (``civil_appeal``)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        raise InvalidFilingTypeError(
            f"Unsupported filing type {value!r}. Choose from: {[m.value for m in cls]}"
        )


@dataclass(frozen=True)
class DraftDocument:
    filing_type: FilingType
    body: str
