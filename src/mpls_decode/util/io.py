from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from mpls_decode.decode.container import decode
from mpls_decode.models.mpls import Mpls
from mpls_decode.util.assertx import ValidationError, assert_file_exists, assert_in_out_dir

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class StageMeta:
    stage: str
    status: str
    started_at: str
    finished_at: str
    duration_ms: int
    inputs: list[str]
    outputs: list[str]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def read_mpls(path: Path) -> Mpls:
    """Read and decode one ``.mpls`` file from disk."""
    assert_file_exists(path, f"Playlist file not found: {path}")
    return decode(path.read_bytes())


def read_json(path: Path, model_type: type[T]) -> T:
    """Load a stage artifact, validating it against ``model_type``.

    Artifacts hold base64 payloads, so validation goes through the JSON
    validator rather than a python dict.
    """
    assert_file_exists(path)
    try:
        return model_type.model_validate_json(path.read_text(encoding="utf-8"))
    except pydantic.ValidationError as exc:
        raise ValidationError(
            f"{path.name} is not a valid {model_type.__name__} artifact: "
            f"{exc.error_count()} error(s)"
        ) from exc


def write_json(path: Path, model: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(indent=2) + "\n", encoding="utf-8")


def write_raw_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)


def write_stage_meta(out_dir: Path, meta: StageMeta) -> Path:
    meta_path = out_dir / "stage_meta" / f"{meta.stage}.json"
    assert_in_out_dir(meta_path, out_dir)
    write_raw_json(meta_path, asdict(meta))
    return meta_path
