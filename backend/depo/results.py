"""Wyniki zwracane przez handlery, zamieniane na odpowiedzi HTTP w depo.main."""
from dataclasses import dataclass, field


@dataclass
class Redirect:
    location: str


@dataclass
class Rendered:
    template: str
    context: dict = field(default_factory=dict)
    status_code: int = 200


@dataclass
class Failure:
    status_code: int
    message: str
