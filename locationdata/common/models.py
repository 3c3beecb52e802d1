"""Data models shared by the parsers, scoring and aggregation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterator, Literal, Mapping, Union

RawValue = Union[int, float, str, None]
RawRecord = Mapping[str, Any]

ComparisonType = Literal["relatief", "absoluut"]
ScoreDirection = Literal["positive", "negative"]
Score = Literal[-1, 0, 1]


@dataclass(frozen=True)
class ScoringConfig:
    comparison_type: ComparisonType = "relatief"
    margin: float = 20.0
    base_value: float | None = None
    direction: ScoreDirection = "positive"

    def to_dict(self) -> dict[str, Any]:
        return {
            "comparisonType": self.comparison_type,
            "margin": self.margin,
            "baseValue": self.base_value,
            "direction": self.direction,
        }


@dataclass(frozen=True)
class ParsedValue:
    """One indicator in absolute and relative (0-100) form.

    ``original_value`` is the verbatim source cell. ``scoring`` and
    ``calculated_score`` stay ``None`` until the value has been scored.
    """

    title: str
    original_value: RawValue
    absolute: float | None
    relative: float | None
    unit: str | None = None
    scoring: ScoringConfig | None = None
    calculated_score: Score | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "originalValue": self.original_value,
            "absolute": self.absolute,
            "relative": self.relative,
            "unit": self.unit,
            "scoring": self.scoring.to_dict() if self.scoring is not None else None,
            "calculatedScore": self.calculated_score,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ParsedValue":
        scoring = payload.get("scoring")
        return cls(
            title=payload["title"],
            original_value=payload.get("originalValue"),
            absolute=payload.get("absolute"),
            relative=payload.get("relative"),
            unit=payload.get("unit"),
            scoring=(
                ScoringConfig(
                    comparison_type=scoring["comparisonType"],
                    margin=scoring["margin"],
                    base_value=scoring["baseValue"],
                    direction=scoring["direction"],
                )
                if scoring
                else None
            ),
            calculated_score=payload.get("calculatedScore"),
        )


@dataclass(frozen=True)
class DatasetMetadata:
    source: str
    fetched_at: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ParsedDataset:
    """Indicators keyed by the raw source key, so location and national sets join by key."""

    indicators: dict[str, ParsedValue]
    metadata: DatasetMetadata

    def get(self, key: str) -> ParsedValue | None:
        return self.indicators.get(key)

    def __len__(self) -> int:
        return len(self.indicators)

    def __iter__(self) -> Iterator[str]:
        return iter(self.indicators)

    def to_dict(self) -> dict[str, Any]:
        return {
            "indicators": {key: value.to_dict() for key, value in self.indicators.items()},
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ParsedDataset":
        metadata = payload["metadata"]
        return cls(
            indicators={key: ParsedValue.from_dict(value) for key, value in payload["indicators"].items()},
            metadata=DatasetMetadata(source=metadata["source"], fetched_at=metadata["fetched_at"]),
        )
