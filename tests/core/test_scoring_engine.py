from __future__ import annotations

from typing import Any

import pytest

from rfpscreening.core import ScoringConfig, ScoringEngine
from rfpscreening.core.numbers import round_half_up
from rfpscreening.core.scoring import rating_points
from rfpscreening.schemas import Candidate, CatalogItem


def build_candidate(**kwargs: Any) -> Candidate:
    defaults: dict[str, Any] = {
        "candidate_id": "RFP-001",
        "requirements": "corrosion resistant, ISO 12944 compliant",
        "quantity": 1000,
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


def build_item(**kwargs: Any) -> CatalogItem:
    defaults: dict[str, Any] = {
        "sku": "SKU-001",
        "product_name": "Protective Coating",
        "properties": {"corrosion_resistance": "high"},
        "compliance": ["ISO 12944"],
        "cost_per_unit": 420,
        "pack_sizes": [20, 200],
    }
    defaults.update(kwargs)
    return CatalogItem(**defaults)


def test_score_matches_reference_scenario():
    engine = ScoringEngine()

    breakdown = engine.score(build_item(), build_candidate())

    assert breakdown.specification == 13
    assert breakdown.compliance == 10
    assert breakdown.quantity == 20
    assert breakdown.application == 0
    assert breakdown.total == 43
    assert breakdown.compliance_matches == ("ISO 12944",)
    assert "Corrosion matched (high)" in breakdown.reasons


def test_score_is_pure_and_bounded():
    engine = ScoringEngine()
    item = build_item(
        properties={
            "corrosion_resistance": "Very High",
            "uv_resistance": "Very High",
            "durability": "Very High",
        },
        compliance=["ISO 12944", "ASTM D523", "ISO 1461", "EN 1504"],
        applications=["Coastal facilities"],
    )
    candidate = build_candidate(
        requirements=["corrosion", "UV exposure", "chemical splash", "ISO", "ASTM", "EN"],
        description="Coastal terminal refurbishment",
    )

    first = engine.score(item, candidate)
    second = engine.score(item, candidate)

    assert first == second
    assert first.total == 100
    assert 0 <= first.total <= 100


def test_specification_points_are_capped():
    engine = ScoringEngine()
    item = build_item(
        properties={
            "corrosion_resistance": "very high",
            "uv_resistance": "very high",
            "durability": "very high",
        },
        compliance=[],
    )
    candidate = build_candidate(requirements="corrosion, exterior sun, chemical")

    breakdown = engine.score(item, candidate)

    assert breakdown.specification == 40
    assert breakdown.compliance == 0


def test_quantity_below_smallest_pack_earns_partial_points():
    engine = ScoringEngine()

    breakdown = engine.score(build_item(pack_sizes=[50]), build_candidate(quantity=10))

    assert breakdown.quantity == 8


def test_zero_quantity_earns_no_quantity_points():
    engine = ScoringEngine()

    breakdown = engine.score(build_item(pack_sizes=[50]), build_candidate(quantity=0))

    assert breakdown.quantity == 0


def test_application_keyword_matches_description_or_title():
    engine = ScoringEngine()
    item = build_item(applications=["Industrial buildings", "Pipelines"])

    by_title = engine.score(item, build_candidate(title="Pipelines upgrade"))
    missing = engine.score(item, build_candidate(title="Office repaint"))

    assert by_title.application == 10
    assert missing.application == 0


def test_missing_rating_contributes_nothing():
    engine = ScoringEngine()

    breakdown = engine.score(build_item(properties={}), build_candidate())

    assert breakdown.specification == 0
    assert "Corrosion matched (none)" in breakdown.reasons


@pytest.mark.parametrize(
    ("value", "points"),
    [("Very High", 3), ("high", 2), ("Medium", 1), ("Low", 0), (None, 0)],
)
def test_rating_points(value, points):
    assert rating_points(value) == points


def test_round_half_up_rounds_halves_upward():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(13.333) == 13


def test_scoring_config_rejects_excess_weights():
    with pytest.raises(ValueError):
        ScoringConfig(specification_weight=60)


def test_custom_weights_are_applied():
    engine = ScoringEngine(config=ScoringConfig(quantity_weight=10, partial_quantity_points=4))

    breakdown = engine.score(build_item(), build_candidate())

    assert breakdown.quantity == 10
    assert breakdown.total == 33
