from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from mpls_decode.models.mpls import Mpls
from mpls_decode.models.summary import AnglesModel, PlaylistSummaryModel
from mpls_decode.stages import (
    angles as angles_stage,
    decode as decode_stage,
    summary as summary_stage,
)
from mpls_decode.util.assertx import ValidationError, assert_file_exists
from mpls_decode.util.io import StageMeta, read_json, utc_now_iso, write_stage_meta
from mpls_decode.util.schemas import write_stage_schemas

LOGGER = logging.getLogger(__name__)

STAGES = [
    "decode",
    "angles",
    "summary",
]

STAGE_OUTPUTS = {
    "decode": ["mpls.json"],
    "angles": ["angles.json"],
    "summary": ["summary.json"],
}

STAGE_INPUTS = {
    "angles": ["mpls.json"],
    "summary": ["mpls.json"],
}

STAGE_MODELS: dict[str, type[BaseModel]] = {
    "decode": Mpls,
    "angles": AnglesModel,
    "summary": PlaylistSummaryModel,
}


@dataclass(frozen=True)
class PipelineOptions:
    force: bool = False
    write_schemas: bool = False
    angle: int | None = None


def _assert_required_inputs(out_dir: Path, stage: str) -> None:
    for rel_path in STAGE_INPUTS.get(stage, []):
        path = out_dir / rel_path
        assert_file_exists(path, f"Missing required upstream artifact: {path}")


def _write_meta(
    out_dir: Path,
    stage: str,
    status: str,
    start_time: float,
    started_at: str,
    inputs: list[str],
    outputs: list[str],
) -> None:
    finished = time.time()
    meta = StageMeta(
        stage=stage,
        status=status,
        started_at=started_at,
        finished_at=utc_now_iso(),
        duration_ms=int((finished - start_time) * 1000),
        inputs=inputs,
        outputs=outputs,
    )
    write_stage_meta(out_dir, meta)


def _select_stages(
    stage: str | None, until: str | None, from_stage: str | None
) -> list[str]:
    for name in (stage, until, from_stage):
        if name and name not in STAGES:
            raise ValidationError(f"Unknown stage: {name}")
    if sum(1 for name in (stage, until, from_stage) if name) > 1:
        raise ValidationError("Use only one of stage, until or from")
    if stage:
        return [stage]
    if until:
        return STAGES[: STAGES.index(until) + 1]
    if from_stage:
        return STAGES[STAGES.index(from_stage) :]
    return list(STAGES)


def run_pipeline(
    input_path: Path | None,
    out_dir: Path,
    options: PipelineOptions,
    stage: str | None = None,
    until: str | None = None,
    from_stage: str | None = None,
) -> dict[str, str]:
    """Run the selected stages and return their status (``ok`` or ``cached``)."""
    selected = _select_stages(stage, until, from_stage)
    out_dir.mkdir(parents=True, exist_ok=True)
    stage_status: dict[str, str] = {}

    for stage_name in selected:
        LOGGER.info("Stage start: %s", stage_name)
        _assert_required_inputs(out_dir, stage_name)
        outputs = [str(out_dir / name) for name in STAGE_OUTPUTS[stage_name]]
        inputs = [str(out_dir / name) for name in STAGE_INPUTS.get(stage_name, [])]
        output_path = out_dir / STAGE_OUTPUTS[stage_name][0]
        start_time = time.time()
        started_at = utc_now_iso()

        if not options.force and output_path.is_file():
            read_json(output_path, STAGE_MODELS[stage_name])
            stage_status[stage_name] = "cached"
        elif stage_name == "decode":
            if input_path is None:
                raise ValidationError("decode stage requires an input playlist file")
            inputs = [str(input_path)]
            decode_stage.run(input_path, out_dir)
            stage_status[stage_name] = "ok"
        elif stage_name == "angles":
            angles_stage.run(out_dir / "mpls.json", out_dir, options.angle)
            stage_status[stage_name] = "ok"
        elif stage_name == "summary":
            summary_stage.run(out_dir / "mpls.json", out_dir)
            stage_status[stage_name] = "ok"

        _write_meta(
            out_dir,
            stage_name,
            stage_status[stage_name],
            start_time,
            started_at,
            inputs,
            outputs,
        )
        LOGGER.info("Stage end: %s (%s)", stage_name, stage_status[stage_name])

    if options.write_schemas:
        write_stage_schemas(out_dir, STAGE_MODELS, selected)
    return stage_status
