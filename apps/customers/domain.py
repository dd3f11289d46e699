"""Customer record mapped from the customers table."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: int
    first_name: str
    last_name: str

    def __str__(self) -> str:
        return (
            f"Customer[id={self.id}, firstName='{self.first_name}', "
            f"lastName='{self.last_name}']"
        )
