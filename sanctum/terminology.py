"""
Spiritual Terminology Validator

Checks content for prohibited phrases and culturally sensitive terms
before it is adapted and shown to a user. Validation never blocks
content; it reports issues, suggestions, and warnings for the caller
to act on.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

SENSITIVITY_LEVELS = ("safe", "caution", "prohibited")


@dataclass(frozen=True)
class SpiritualTerm:
    term: str
    tradition: str
    alternatives: tuple[str, ...]
    sensitivity: str  # "safe" | "caution" | "prohibited"
    description: str


@dataclass
class ValidationResult:
    is_valid: bool
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    cultural_warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "issues": self.issues,
            "suggestions": self.suggestions,
            "cultural_warnings": self.cultural_warnings,
        }


SPIRITUAL_TERMS: tuple[SpiritualTerm, ...] = (
    SpiritualTerm(
        term="spirit animal",
        tradition="indigenous",
        alternatives=("spirit guide", "power animal", "totem energy"),
        sensitivity="prohibited",
        description="Sacred concept that should not be appropriated",
    ),
    SpiritualTerm(
        term="namaste",
        tradition="hindu",
        alternatives=("greeting with respect", "honoring your light"),
        sensitivity="caution",
        description="Sacred Hindu greeting requiring proper context",
    ),
    SpiritualTerm(
        term="meditation",
        tradition="universal",
        alternatives=("mindfulness practice", "contemplation"),
        sensitivity="safe",
        description="Universally accepted spiritual practice",
    ),
    SpiritualTerm(
        term="sage burning",
        tradition="indigenous",
        alternatives=("herb cleansing", "aromatic purification"),
        sensitivity="prohibited",
        description="Sacred Native American practice",
    ),
)

PROHIBITED_PHRASES: tuple[str, ...] = (
    "spiritual warfare",
    "kill negative energy",
    "destroy demons",
    "eliminate evil spirits",
)


class SpiritualTerminologyValidator:
    """Substring-based validator over a term database and a phrase blocklist."""

    def __init__(
        self,
        terms: tuple[SpiritualTerm, ...] = SPIRITUAL_TERMS,
        prohibited_phrases: tuple[str, ...] = PROHIBITED_PHRASES,
    ):
        self._terms: dict[str, SpiritualTerm] = {t.term.lower(): t for t in terms}
        self._prohibited = tuple(dict.fromkeys(p.lower() for p in prohibited_phrases))
        self._lock = threading.Lock()

    def validate_content(self, content: str, user_tradition: Optional[str] = None) -> ValidationResult:
        issues: list[str] = []
        suggestions: list[str] = []
        warnings: list[str] = []

        content_lower = content.lower()

        for phrase in self._prohibited:
            if phrase in content_lower:
                issues.append(f'Prohibited phrase detected: "{phrase}"')
                suggestions.append(f'Consider using peaceful language instead of "{phrase}"')

        for key, term in self._terms.items():
            if key not in content_lower:
                continue
            if term.sensitivity == "prohibited":
                issues.append(f'Culturally inappropriate term: "{term.term}"')
                suggestions.append(f"Use alternative: {' or '.join(term.alternatives)}")
                warnings.append(term.description)
            elif term.sensitivity == "caution":
                # Only a concern when the reader is outside the term's tradition
                if user_tradition and user_tradition != term.tradition:
                    warnings.append(
                        f'"{term.term}" is from {term.tradition} tradition. {term.description}'
                    )
                    suggestions.append(f"Consider: {' or '.join(term.alternatives)}")

        return ValidationResult(
            is_valid=not issues,
            issues=issues,
            suggestions=suggestions,
            cultural_warnings=warnings,
        )

    def get_safe_alternatives(self, term: str) -> list[str]:
        found = self._terms.get(term.lower())
        return list(found.alternatives) if found else []

    def add_custom_term(self, term: SpiritualTerm) -> None:
        if term.sensitivity not in SENSITIVITY_LEVELS:
            raise ValueError(
                f"Invalid sensitivity {term.sensitivity!r}; expected one of {SENSITIVITY_LEVELS}"
            )
        with self._lock:
            terms = dict(self._terms)
            terms[term.term.lower()] = term
            self._terms = terms


terminology_validator = SpiritualTerminologyValidator()
