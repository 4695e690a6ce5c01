from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from mpls_decode.pipeline import PipelineOptions, STAGES, run_pipeline
from mpls_decode.util.assertx import ValidationError
from mpls_decode.util.io import read_mpls
from mpls_decode.util.logging import configure_logging

app = typer.Typer(add_completion=False)


def _print_angles(input_path: Path, angle: Optional[int]) -> None:
    mpls = read_mpls(input_path)
    angles = mpls.angles()
    if angle is not None:
        if angle < 0 or angle >= len(angles):
            raise ValidationError(
                f"angle {angle} out of range; playlist has {len(angles)} angle(s)"
            )
        angles = [angles[angle]]
    for item in angles:
        names = " ".join(clip.file_name for clip in item.segments())
        typer.echo(f"angle {item}: {names}")


@app.command()
def main(
    input_path: Optional[Path] = typer.Argument(
        None, exists=True, file_okay=True, dir_okay=False
    ),
    out: Optional[Path] = typer.Option(None, "--out", dir_okay=True, file_okay=False),
    stage: Optional[str] = typer.Option(None, "--stage"),
    until: Optional[str] = typer.Option(None, "--until"),
    from_stage: Optional[str] = typer.Option(None, "--from"),
    force: bool = typer.Option(False, "--force"),
    write_schemas: bool = typer.Option(
        False, "--write-schemas", help="Write JSON schemas of the stage artifacts"
    ),
    angle: Optional[int] = typer.Option(
        None, "--angle", min=0, help="Restrict angle output to one angle index"
    ),
    list_stages: bool = typer.Option(False, "--list-stages"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(verbose)
    if list_stages:
        typer.echo("\n".join(STAGES))
        raise typer.Exit(code=0)

    if stage and until:
        typer.echo("Error: use --stage or --until, not both")
        raise typer.Exit(code=2)
    if stage and from_stage:
        typer.echo("Error: use --stage or --from, not both")
        raise typer.Exit(code=2)
    if until and from_stage:
        typer.echo("Error: use --until or --from, not both")
        raise typer.Exit(code=2)

    try:
        if out is None:
            if input_path is None:
                typer.echo("Error: input_path is required unless --list-stages")
                raise typer.Exit(code=2)
            _print_angles(input_path, angle)
            return
        options = PipelineOptions(force=force, write_schemas=write_schemas, angle=angle)
        run_pipeline(
            input_path=input_path,
            out_dir=out,
            options=options,
            stage=stage,
            until=until,
            from_stage=from_stage,
        )
    except ValidationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
