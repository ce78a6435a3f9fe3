"""Point weights and suitability thresholds for candidate scoring."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    available_bonus: int = 50
    occupied_penalty: int = 100
    ideal_capacity_bonus: int = 30
    ideal_capacity_slack: int = 2
    spacious_bonus: int = 15
    insufficient_capacity_penalty: int = 50
    same_type_bonus: int = 20
    same_floor_bonus: int = 10
    amenity_points: int = 2
    amenity_cap: int = 10


@dataclass(frozen=True)
class SuitabilityThresholds:
    perfect: int = 80
    good: int = 60
    acceptable: int = 40
    oversize_margin: int = 3


DEFAULT_WEIGHTS = ScoringWeights()
DEFAULT_THRESHOLDS = SuitabilityThresholds()


def validate_scoring_weights(weights: ScoringWeights) -> None:
    for name, value in vars(weights).items():
        if value < 0:
            raise ValueError(f"{name} must be >= 0")
    if weights.amenity_cap < weights.amenity_points:
        raise ValueError("amenity_cap must be >= amenity_points")


def validate_suitability_thresholds(thresholds: SuitabilityThresholds) -> None:
    if thresholds.acceptable < 0:
        raise ValueError("acceptable threshold must be >= 0")
    if not thresholds.acceptable <= thresholds.good <= thresholds.perfect:
        raise ValueError("thresholds must satisfy acceptable <= good <= perfect")
    if thresholds.oversize_margin < 0:
        raise ValueError("oversize_margin must be >= 0")
