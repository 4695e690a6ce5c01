from __future__ import annotations

"""Stage A: decode.

Reads one ``.mpls`` file, decodes it and writes the full decoded tree to
mpls.json. Every later stage works from that artifact only.
"""

from pathlib import Path
import logging

from mpls_decode.models.mpls import Mpls
from mpls_decode.util.io import read_mpls, write_json


def run(input_path: Path, out_dir: Path) -> Mpls:
    mpls = read_mpls(input_path)
    logger = logging.getLogger(__name__)
    logger.info(
        "decode: %s version=%s play_items=%d sub_paths=%d marks=%d ext=%d",
        input_path.name,
        mpls.version,
        len(mpls.play_list.play_items),
        len(mpls.play_list.sub_paths),
        len(mpls.marks),
        len(mpls.ext),
    )
    write_json(out_dir / "mpls.json", mpls)
    return mpls
