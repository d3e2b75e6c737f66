"""Data classes for royal family members."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Member:
    name: str
    date_of_birth: date
    is_alive: bool
    title: str = ""
    death_date: date | None = None

    def age(self, on: date | None = None) -> int:
        """
        Age in whole years.

        Measured at death when the member is deceased and the death date is known,
        otherwise against `on` (default: today).
        """
        if not self.is_alive and self.death_date is not None:
            end = self.death_date
        else:
            end = on or date.today()

        years = end.year - self.date_of_birth.year
        if (end.month, end.day) < (self.date_of_birth.month, self.date_of_birth.day):
            years -= 1
        return years

    def __str__(self) -> str:
        status = "Alive" if self.is_alive else "Deceased"
        title = f" ({self.title})" if self.title else ""
        return f"{self.name}{title}, Born: {self.date_of_birth.isoformat()}, {status}"
