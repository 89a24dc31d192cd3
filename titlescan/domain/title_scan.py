"""
titlescan/domain/title_scan.py

Domain models for title scan outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass

RETRIEVAL_ERROR = "retrieval error"
NON_SUCCESS_STATUS = "non-success status"
PARSE_ERROR = "parse error"

FAILURE_KINDS = (RETRIEVAL_ERROR, NON_SUCCESS_STATUS, PARSE_ERROR)


@dataclass(frozen=True)
class Outcome:
    """
    The single success-or-failure record produced for one target.

    Successful outcomes carry the extracted value (possibly empty); failed
    outcomes carry a failure kind and a human-readable detail, never a value.
    """

    target: str
    value: str | None = None
    failure_kind: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.failure_kind is None:
            if self.value is None or self.error is not None:
                raise ValueError("Successful outcome requires a value and no error.")
            return
        if self.failure_kind not in FAILURE_KINDS:
            raise ValueError(
                f"Unknown failure_kind='{self.failure_kind}'. "
                f"Allowed kinds: {', '.join(FAILURE_KINDS)}."
            )
        if self.value is not None:
            raise ValueError("Failed outcome must not carry an extracted value.")

    @classmethod
    def success(cls, target: str, value: str) -> "Outcome":
        return cls(target=target, value=value)

    @classmethod
    def failure(cls, target: str, kind: str, detail: str) -> "Outcome":
        return cls(target=target, failure_kind=kind, error=detail)

    @property
    def succeeded(self) -> bool:
        return self.failure_kind is None

    @property
    def reason(self) -> str | None:
        if self.failure_kind is None:
            return None
        return f"{self.failure_kind}: {self.error or ''}".rstrip()
