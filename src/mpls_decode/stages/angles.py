from __future__ import annotations

"""Stage B: angles.

Derives the per-angle segment sequences from mpls.json and writes
angles.json. With ``angle`` set, only that angle is written.
"""

from pathlib import Path
import logging

from mpls_decode.models.mpls import Mpls
from mpls_decode.models.summary import AngleSegmentsModel, AnglesModel
from mpls_decode.util.assertx import ValidationError
from mpls_decode.util.io import read_json, write_json


def run(mpls_path: Path, out_dir: Path, angle: int | None = None) -> AnglesModel:
    mpls = read_json(mpls_path, Mpls)
    angles = mpls.angles()
    if angle is not None:
        if angle < 0 or angle >= len(angles):
            raise ValidationError(
                f"angle {angle} out of range; playlist has {len(angles)} angle(s)"
            )
        angles = [angles[angle]]

    model = AnglesModel(
        source=str(mpls_path),
        angles=[
            AngleSegmentsModel(
                index=item.index,
                segments=[clip.file_name for clip in item.segments()],
            )
            for item in angles
        ],
    )
    logging.getLogger(__name__).info("angles: count=%d", len(model.angles))
    write_json(out_dir / "angles.json", model)
    return model
