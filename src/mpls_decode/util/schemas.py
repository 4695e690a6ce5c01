from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Type

from pydantic import BaseModel

from mpls_decode.util.assertx import assert_in_out_dir
from mpls_decode.util.io import write_raw_json


def schema_path(out_dir: Path, name: str) -> Path:
    return out_dir / "schemas" / f"{name}.schema.json"


def write_model_schema(out_dir: Path, name: str, model: Type[BaseModel]) -> Path:
    """Write the serialized-form JSON schema of ``model`` under ``out_dir/schemas``."""
    path = schema_path(out_dir, name)
    assert_in_out_dir(path, out_dir)
    schema = model.model_json_schema(mode="serialization")
    schema["$comment"] = f"{name} stage artifact"
    write_raw_json(path, schema)
    return path


def write_stage_schemas(
    out_dir: Path,
    stage_models: Mapping[str, Type[BaseModel]],
    stages: Iterable[str],
) -> list[Path]:
    return [write_model_schema(out_dir, name, stage_models[name]) for name in stages]
