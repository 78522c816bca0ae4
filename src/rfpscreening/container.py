"""Dependency injection container for the screening engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .catalog import DEFAULT_CATALOG, StaticCatalogProvider, YamlCatalogProvider
from .core import (
    EliminationPipeline,
    PacingConfig,
    PhaseController,
    PipelineConfig,
    PricingCalculator,
    PricingConfig,
    ProfilePacer,
    ResultAssembler,
    ScoringConfig,
    ScoringEngine,
    ShortlistSelector,
)
from .pipeline import ScreeningPipeline


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    catalog = providers.Singleton(StaticCatalogProvider, items=DEFAULT_CATALOG)

    pipeline_config = providers.Singleton(PipelineConfig)
    scoring_engine = providers.Singleton(ScoringEngine)
    shortlist_selector = providers.Singleton(ShortlistSelector)
    pricing_calculator = providers.Singleton(PricingCalculator)
    pacer = providers.Singleton(ProfilePacer)

    elimination_pipeline = providers.Singleton(
        EliminationPipeline.from_config,
        catalog,
        config=pipeline_config,
        engine=scoring_engine,
        selector=shortlist_selector,
    )

    result_assembler = providers.Singleton(
        ResultAssembler,
        pricing=pricing_calculator,
    )

    controller = providers.Factory(
        PhaseController,
        pipeline=elimination_pipeline,
        assembler=result_assembler,
        pacer=pacer,
    )

    screening_pipeline = providers.Factory(
        ScreeningPipeline,
        controller=controller,
    )


def create_container(*, settings: dict | None = None) -> ScreeningContainer:
    """Instantiate container with optional overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    pipeline_settings = settings.get("pipeline") or {}
    if pipeline_settings:
        container.pipeline_config.override(providers.Object(PipelineConfig(**pipeline_settings)))

    scoring_settings = settings.get("scoring") or {}
    if scoring_settings:
        scoring_config = ScoringConfig(**scoring_settings)
        container.scoring_engine.override(
            providers.Singleton(ScoringEngine, config=scoring_config)
        )

    pricing_settings = settings.get("pricing") or {}
    if pricing_settings:
        pricing_config = PricingConfig(**pricing_settings)
        container.pricing_calculator.override(
            providers.Singleton(PricingCalculator, config=pricing_config)
        )

    pacing_settings = settings.get("pacing") or {}
    if pacing_settings:
        pacing_config = PacingConfig(**pacing_settings)
        container.pacer.override(providers.Singleton(ProfilePacer, config=pacing_config))

    catalog_path = (settings.get("catalog") or {}).get("path")
    if catalog_path:
        container.catalog.override(providers.Singleton(YamlCatalogProvider, catalog_path))

    return container
