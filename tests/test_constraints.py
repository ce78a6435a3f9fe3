"""Tests for scoring weight and suitability threshold validation."""

from __future__ import annotations

import pytest

from frontdesk.domain.constraints import (
    ScoringWeights,
    SuitabilityThresholds,
    validate_scoring_weights,
    validate_suitability_thresholds,
)
from frontdesk.services.recommendation_service import RoomRecommendationService


# --- Baseline pass ---

def test_default_weights_pass() -> None:
    validate_scoring_weights(ScoringWeights())


def test_default_thresholds_pass() -> None:
    validate_suitability_thresholds(SuitabilityThresholds())


# --- Weights ---

def test_negative_weight_raises() -> None:
    with pytest.raises(ValueError):
        validate_scoring_weights(ScoringWeights(same_floor_bonus=-1))


def test_amenity_cap_below_unit_points_raises() -> None:
    with pytest.raises(ValueError):
        validate_scoring_weights(ScoringWeights(amenity_points=3, amenity_cap=2))


# --- Thresholds ---

def test_unordered_thresholds_raise() -> None:
    with pytest.raises(ValueError):
        validate_suitability_thresholds(SuitabilityThresholds(perfect=50, good=60))


def test_negative_acceptable_threshold_raises() -> None:
    with pytest.raises(ValueError):
        validate_suitability_thresholds(SuitabilityThresholds(acceptable=-1))


def test_negative_oversize_margin_raises() -> None:
    with pytest.raises(ValueError):
        validate_suitability_thresholds(SuitabilityThresholds(oversize_margin=-1))


def test_equal_thresholds_pass() -> None:
    """Collapsed tiers are allowed."""
    validate_suitability_thresholds(SuitabilityThresholds(perfect=60, good=60, acceptable=60))


def test_service_validates_configuration() -> None:
    with pytest.raises(ValueError):
        RoomRecommendationService(thresholds=SuitabilityThresholds(good=90))
