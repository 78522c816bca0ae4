"""Typer CLI entrypoint for the screening pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from dependency_injector import providers
from pydantic import ValidationError

from .config import load_settings
from .container import create_container
from .core import ImmediatePacer, SpeedProfile
from .logging import configure_logging
from .pipeline import AuditLogger

app = typer.Typer(help="Procurement request screening CLI.")


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    catalog: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Catalog YAML path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    speed: SpeedProfile = typer.Option(SpeedProfile.REALISTIC, help="Simulated pacing between phases."),
    no_delay: bool = typer.Option(False, "--no-delay", help="Skip simulated pacing entirely."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Run the elimination pipeline over a candidates file."""
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = load_settings(config)
        except (ValueError, ValidationError) as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc
    if catalog:
        settings["catalog"] = {"path": str(catalog)}

    configure_logging(log_level)

    try:
        container = create_container(settings=settings)
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Invalid settings: {exc}", param_name="config") from exc
    if no_delay:
        container.pacer.override(providers.Singleton(ImmediatePacer))

    pipeline = container.screening_pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    snapshot = pipeline.run(
        candidates_path=candidates,
        output_path=output,
        speed_profile=speed,
        audit_logger=audit_logger,
    )
    final = snapshot.final_selection
    if final is None:
        typer.echo(f"No selection made (phase {snapshot.phase.value}). Results saved to {output}.")
        return
    typer.echo(
        f"Selected {final.candidate.candidate_id} with {final.item.sku} "
        f"(score {final.match_score}, total cost {final.total_cost}). Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
