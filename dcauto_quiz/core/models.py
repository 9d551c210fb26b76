"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Domain(str, Enum):
    """Exam blueprint domains used to filter the question bank."""

    NPF = "1.0 Network Programmability Foundation"
    ACI = "2.0 Controller Based DC Networking (ACI)"
    NXOS = "3.0 Device-centric Networking (NX-OS)"
    UCS = "4.0 DC Compute (UCS/Intersight)"

    @property
    def code(self) -> str:
        return self.value.split(" ", 1)[0]


# Explicit order shared by the domain selectors and the core filter.
DOMAINS: tuple[Domain, ...] = (Domain.NPF, Domain.ACI, Domain.NXOS, Domain.UCS)

ALL_DOMAINS = "ALL"

DomainFilter = Domain | str


def parse_domain(value: str | Domain) -> Domain:
    """Resolve a domain from its label, numeric code (``"2.0"``) or short name."""
    if isinstance(value, Domain):
        return value
    text = value.strip()
    for domain in DOMAINS:
        if text in (domain.value, domain.code, domain.name) or text.upper() == domain.name:
            return domain
    raise ValueError(f"Unknown domain: {value!r}")


def normalize_domain_filter(value: DomainFilter | None) -> DomainFilter:
    """Return ``ALL_DOMAINS`` or a concrete ``Domain`` for a filter selection."""
    if value is None:
        return ALL_DOMAINS
    if isinstance(value, str) and not isinstance(value, Domain) and value.strip().upper() == ALL_DOMAINS:
        return ALL_DOMAINS
    return parse_domain(value)


@dataclass(frozen=True, slots=True)
class Question:
    """Immutable flashcard: one prompt with a single correct answer."""

    id: str
    domain: Domain
    prompt: str
    correct_answer: str

    @property
    def domain_code(self) -> str:
        return self.domain.code


class SessionPhase(Enum):
    """Lifecycle phase of a quiz session."""

    SETUP = auto()
    PLAYING = auto()
    SUMMARY = auto()
