from __future__ import annotations

from typing import Any

import pendulum
import pytest

from rfpscreening.catalog import StaticCatalogProvider
from rfpscreening.core import ScoredCandidate, ScoringEngine, ShortlistSelector, WorkingSet
from rfpscreening.core.stages import (
    DeadlineConfig,
    DeadlineStage,
    ScoringStage,
    ShortlistConfig,
    ShortlistStage,
    SpecificationStage,
    ThresholdConfig,
)
from rfpscreening.core.models import Severity
from rfpscreening.schemas import Candidate, CatalogItem

NOW = pendulum.datetime(2025, 3, 1, 9, 0, 0, tz="UTC")


def fixed_now() -> pendulum.DateTime:
    return NOW


def build_candidate(**kwargs: Any) -> Candidate:
    defaults: dict[str, Any] = {
        "candidate_id": "RFP-001",
        "title": "Tank coating",
        "requirements": "corrosion resistant, ISO 12944 compliant",
        "deadline": NOW.add(days=30),
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


def build_scored(candidate_id: str, score: int) -> ScoredCandidate:
    return ScoredCandidate(
        candidate=build_candidate(candidate_id=candidate_id),
        score=score,
        matched_item=build_item(),
        breakdown=None,
    )


def test_deadline_exactly_seven_days_out_passes():
    stage = DeadlineStage(now_provider=fixed_now)
    candidate = build_candidate(deadline=NOW.add(days=7))

    outcome = stage.apply(WorkingSet(candidates=(candidate,)))

    assert outcome.step.survivors == (candidate,)
    assert outcome.step.eliminated == ()
    assert outcome.messages[0].severity is Severity.SUCCESS


def test_deadline_just_under_seven_days_is_eliminated():
    stage = DeadlineStage(now_provider=fixed_now)
    candidate = build_candidate(deadline=NOW.add(days=6, hours=23))

    outcome = stage.apply(WorkingSet(candidates=(candidate,)))

    assert outcome.step.survivors == ()
    (elimination,) = outcome.step.eliminated
    assert elimination.candidate is candidate
    assert elimination.reason == "Insufficient deadline (6 days < 7 days required)"
    assert outcome.messages[0].message == "Deadline filter: 0 passed, 1 eliminated"
    assert outcome.messages[0].severity is Severity.WARNING


def test_deadline_in_past_and_missing_deadline():
    stage = DeadlineStage(config=DeadlineConfig(min_days=3), now_provider=fixed_now)
    past = build_candidate(candidate_id="past", deadline=NOW.subtract(days=2))
    unknown = build_candidate(candidate_id="unknown", deadline=None)

    outcome = stage.apply(WorkingSet(candidates=(past, unknown)))

    assert [c.candidate_id for c in outcome.step.survivors] == ["unknown"]
    assert outcome.step.eliminated[0].reason == "Insufficient deadline (-2 days < 3 days required)"


def test_specification_stage_requires_keywords():
    stage = SpecificationStage()
    matching = build_candidate(candidate_id="a", requirements="Meets ASTM D523 gloss")
    missing = build_candidate(candidate_id="b", requirements="Blue paint, matte finish")
    empty = build_candidate(candidate_id="c", requirements=None)

    outcome = stage.apply(WorkingSet(candidates=(matching, missing, empty)))

    assert outcome.working.candidates == (matching,)
    assert [e.candidate.candidate_id for e in outcome.step.eliminated] == ["b", "c"]
    assert all(
        e.reason == "Missing critical specification or compliance keywords"
        for e in outcome.step.eliminated
    )
    assert outcome.messages[0].message == "Spec/Compliance filter: 1 passed, 2 eliminated"


def test_scoring_stage_ranks_and_applies_threshold():
    catalog = StaticCatalogProvider([build_item()])
    stage = ScoringStage(engine=ScoringEngine(), catalog=catalog)
    strong = build_candidate(candidate_id="strong")
    weak = build_candidate(candidate_id="weak", requirements="ISO paint")

    outcome = stage.apply(WorkingSet(candidates=(weak, strong)))

    assert [entry.candidate.candidate_id for entry in outcome.step.scored] == ["strong"]
    assert outcome.working.ranking[0].score == 43
    assert outcome.working.ranking[0].estimated_cost == 420000
    (elimination,) = outcome.step.eliminated
    assert elimination.candidate is weak
    assert elimination.reason == "Score 30 below threshold 40"
    assert outcome.messages[0].message == "Scoring complete: Top score 43, Lowest score 30"
    assert outcome.messages[1].message == "Score filter: 1 passed (score >= 40), 1 eliminated"


def test_scoring_stage_keeps_input_order_for_ties():
    catalog = StaticCatalogProvider([build_item()])
    stage = ScoringStage(engine=ScoringEngine(), catalog=catalog)
    candidates = tuple(build_candidate(candidate_id=f"RFP-{idx}") for idx in range(4))

    outcome = stage.apply(WorkingSet(candidates=candidates))

    assert outcome.step.survivors == candidates


def test_best_match_prefers_first_item_on_tie():
    first = build_item(sku="FIRST")
    second = build_item(sku="SECOND")
    stage = ScoringStage(engine=ScoringEngine(), catalog=StaticCatalogProvider([first, second]))

    entry = stage.best_match(build_candidate(), [first, second])

    assert entry.matched_item.sku == "FIRST"


def test_scoring_stage_with_empty_catalog_eliminates_everything():
    stage = ScoringStage(
        engine=ScoringEngine(),
        catalog=StaticCatalogProvider([]),
        config=ThresholdConfig(min_score=1),
    )

    outcome = stage.apply(WorkingSet(candidates=(build_candidate(),)))

    assert outcome.step.survivors == ()
    assert outcome.step.eliminated[0].reason == "Score 0 below threshold 1"


def test_shortlist_stage_truncates_and_eliminates_the_rest():
    ranking = tuple(build_scored(f"RFP-{idx}", score) for idx, score in enumerate([90, 80, 70, 60]))
    stage = ShortlistStage(config=ShortlistConfig(top_n=3))

    outcome = stage.apply(
        WorkingSet(candidates=tuple(entry.candidate for entry in ranking), ranking=ranking)
    )

    assert [c.candidate_id for c in outcome.step.survivors] == ["RFP-0", "RFP-1", "RFP-2"]
    (elimination,) = outcome.step.eliminated
    assert elimination.candidate.candidate_id == "RFP-3"
    assert elimination.reason == "Ranked beyond top 3"
    assert outcome.messages[0].message == "Final shortlist: 3 candidates selected"


@pytest.mark.parametrize(
    ("scores", "expected"),
    [
        ([90, 80, 70, 60, 50], 3),
        ([90, 20, 10], 1),
        ([30, 20, 10, 5], 3),
        ([30], 1),
        ([], 0),
    ],
)
def test_shortlist_selector_sizes(scores, expected):
    ranking = [build_scored(f"RFP-{idx}", score) for idx, score in enumerate(scores)]

    result = ShortlistSelector().shortlist(ranking, top_n=3, min_score=40)

    assert len(result) == expected


def test_shortlist_selector_falls_back_to_unfiltered_ranking():
    ranking = [build_scored(f"RFP-{idx}", score) for idx, score in enumerate([35, 30, 25, 20])]

    result = ShortlistSelector().shortlist(ranking, top_n=3, min_score=40)

    assert result == ranking[:3]


def test_shortlist_selector_with_non_positive_top_n():
    ranking = [build_scored("RFP-0", 90)]

    assert ShortlistSelector().shortlist(ranking, top_n=0, min_score=40) == []


def test_deadline_reason_rounds_remaining_days_up():
    stage = DeadlineStage(now_provider=fixed_now)
    candidate = build_candidate(deadline=NOW.add(days=3, hours=12))

    outcome = stage.apply(WorkingSet(candidates=(candidate,)))

    assert outcome.step.eliminated[0].reason == "Insufficient deadline (4 days < 7 days required)"


def test_best_match_requires_a_positive_score():
    item = build_item(properties={}, compliance=[], pack_sizes=[50])
    stage = ScoringStage(
        engine=ScoringEngine(),
        catalog=StaticCatalogProvider([item]),
        config=ThresholdConfig(min_score=0),
    )
    candidate = build_candidate(requirements="matte finish", quantity=0)

    outcome = stage.apply(WorkingSet(candidates=(candidate,)))

    (entry,) = outcome.step.scored
    assert entry.score == 0
    assert entry.matched_item is None
    assert entry.estimated_cost == 0
