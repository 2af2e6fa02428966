from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    is_income: bool


@dataclass(frozen=True)
class NewCategory:
    name: str
    is_income: bool = False
