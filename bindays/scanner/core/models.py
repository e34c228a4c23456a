"""
Value types shared by the scanner
"""
import datetime
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ServiceType(Enum):
    REFUSE = "refuse"
    RECYCLING = "recycling"


@dataclass(frozen=True)
class ServiceDetails:
    """A single collection: when it happens and what is collected."""
    date: datetime.date
    service_type: ServiceType

    def __lt__(self, other: "ServiceDetails") -> bool:
        # Ordered by date only; two entries on the same day are not ordered
        return self.date < other.date

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "service_type": self.service_type.value}


@dataclass(frozen=True)
class StreetName:
    text: str


@dataclass(frozen=True)
class WorkSheetsSearchDirectory:
    path: Path


@dataclass(frozen=True)
class CurrentDate:
    local_date: datetime.date


def create_current_date(today: Optional[datetime.date] = None) -> CurrentDate:
    """Capture "today" from the system clock unless a date is given."""
    return CurrentDate(today or datetime.date.today())


def earlier_of(current: Optional[ServiceDetails], candidate: Optional[ServiceDetails]) -> Optional[ServiceDetails]:
    """
    Keep whichever entry comes first.

    Uses strict "earlier than", so on a tie the entry already held wins.
    """
    if candidate is None:
        return current
    if current is None or candidate < current:
        return candidate
    return current
