"""URL risk models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"


class RiskReport(BaseModel):
    """Verdict for a single URL. Produced once per scan, never mutated."""

    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    score: int = Field(ge=0)
    text: str = Field(min_length=1)


class ScanRecord(RiskReport):
    """A report together with the URL it was produced for."""

    url: str

    @classmethod
    def from_report(cls, report: RiskReport, url: str) -> "ScanRecord":
        return cls(url=url, **report.model_dump())

    def to_report(self) -> RiskReport:
        return RiskReport(level=self.level, score=self.score, text=self.text)


@dataclass(frozen=True)
class ParsedUrl:
    raw: str
    scheme: str
    hostname: str
    path: str
