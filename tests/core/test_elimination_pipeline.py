from __future__ import annotations

from typing import Any

import pendulum
import pytest

from rfpscreening.catalog import StaticCatalogProvider, default_catalog
from rfpscreening.core import (
    EliminationPipeline,
    PartitionError,
    PipelineConfig,
    StageOutcome,
    StepState,
    WorkingSet,
)
from rfpscreening.schemas import Candidate, CatalogItem

NOW = pendulum.datetime(2025, 3, 1, tz="UTC")


def build_candidate(**kwargs: Any) -> Candidate:
    defaults: dict[str, Any] = {
        "candidate_id": "RFP-001",
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


def build_pipeline(items=None, **config: Any) -> EliminationPipeline:
    catalog = StaticCatalogProvider(items if items is not None else [build_item()])
    return EliminationPipeline.from_config(
        catalog,
        config=PipelineConfig(**config),
        now_provider=lambda: NOW,
    )


def mixed_candidates() -> list[Candidate]:
    return [
        build_candidate(candidate_id="late", deadline=NOW.add(days=2)),
        build_candidate(candidate_id="no-spec", requirements="Blue matte finish"),
        build_candidate(candidate_id="weak", requirements="ISO paint"),
        build_candidate(candidate_id="a"),
        build_candidate(candidate_id="b"),
        build_candidate(candidate_id="c"),
        build_candidate(candidate_id="d"),
    ]


def test_each_stage_partitions_its_input():
    candidates = mixed_candidates()

    result = build_pipeline().run(candidates)

    previous = len(candidates)
    for step in result.steps:
        assert len(step.survivors) + len(step.eliminated) == previous
        previous = len(step.survivors)
    assert [step.stage for step in result.steps] == [
        "Deadline Validation",
        "Spec/Compliance Filter",
        "Scoring & Threshold Filter",
        "Final Shortlist",
    ]


def test_run_returns_top_three_shortlist():
    result = build_pipeline().run(mixed_candidates())

    assert [entry.candidate.candidate_id for entry in result.shortlist] == ["a", "b", "c"]
    deadline, spec, scoring, shortlist = result.steps
    assert [e.candidate.candidate_id for e in deadline.eliminated] == ["late"]
    assert [e.candidate.candidate_id for e in spec.eliminated] == ["no-spec"]
    assert [e.candidate.candidate_id for e in scoring.eliminated] == ["weak"]
    assert [e.candidate.candidate_id for e in shortlist.eliminated] == ["d"]


def test_threshold_and_top_n_are_configurable():
    result = build_pipeline(score_threshold=20, top_n=5).run(mixed_candidates())

    assert [entry.candidate.candidate_id for entry in result.shortlist] == ["a", "b", "c", "d", "weak"]


def test_everything_eliminated_yields_empty_shortlist():
    result = build_pipeline().run([build_candidate(requirements="no keywords here")])

    assert result.shortlist == ()
    assert result.steps[-1].survivors == ()


def test_bundled_catalog_scores_reference_request():
    pipeline = EliminationPipeline.from_config(default_catalog(), now_provider=lambda: NOW)

    result = pipeline.run([build_candidate()])

    (entry,) = result.shortlist
    assert entry.score >= 40
    assert entry.matched_item is not None


def test_partition_violation_is_detected():
    class DroppingStage:
        name = "Dropping"

        def apply(self, working: WorkingSet) -> StageOutcome:
            kept = working.candidates[:1]
            return StageOutcome(
                step=StepState(stage=self.name, survivors=kept),
                working=WorkingSet(candidates=kept),
            )

    pipeline = EliminationPipeline([DroppingStage()])

    with pytest.raises(PartitionError):
        pipeline.run([build_candidate(candidate_id="x"), build_candidate(candidate_id="y")])


def test_pipeline_config_requires_positive_top_n():
    with pytest.raises(ValueError):
        PipelineConfig(top_n=0)
