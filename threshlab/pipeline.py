# pipeline.py
# Orchestration: threshold every file matching a glob and summarise the masks.

from __future__ import annotations
import glob, logging, os
from typing import Dict, List
import numpy as np
from skimage.measure import label as sklabel

from .binarise import binarise, validate_method, validate_thresh_value
from .config import D
from .errors import InvalidArgument
from .io_save_load import load_image, save_binary, save_json

logger = logging.getLogger(__name__)


def summarise(binary: np.ndarray) -> Dict:
    """Foreground (255) fraction and 8-connected component count of a binary image."""
    fg = binary[..., 0] == 255
    comps = int(sklabel(fg, connectivity=D.COMPONENT_CONNECTIVITY).max())
    return {"foreground_fraction": float(fg.mean()), "components": comps}


def output_name(path: str, method: str) -> str:
    """a.png -> a_png_<method>.png, so same-stem inputs keep separate outputs."""
    stem, ext = os.path.splitext(os.path.basename(path))
    suffix = f"_{ext[1:]}" if ext else ""
    return f"{stem}{suffix}_{method}.png"


def threshold_files(
    input_glob: str,
    out_dir: str,
    method: str | None = None,
    inverted: bool | None = None,
    thresh_value: float | None = None,
    out_json: str | None = None,
) -> List[Dict]:
    """
    For each file (sorted):
      - load as [H,W,C]
      - binarise with the chosen method (None -> current config.D value)
      - write <stem>_<ext>_<method>.png into out_dir
    Returns list[dict] rows; also written as {"results": rows} when out_json is set.
    Two inputs mapping to the same output name raise InvalidArgument before anything is written.
    """
    method = D.METHOD if method is None else method
    inverted = D.INVERTED if inverted is None else inverted
    thresh_value = D.THRESH_VALUE if thresh_value is None else thresh_value
    validate_method(method)
    validate_thresh_value(thresh_value)

    paths = sorted(glob.glob(input_glob))
    if not paths:
        logger.warning("no files match %s", input_glob)
    targets: Dict[str, str] = {}
    for path in paths:
        name = output_name(path, method)
        if name in targets:
            raise InvalidArgument(f"{path} and {targets[name]} would both write {name}")
        targets[name] = path

    os.makedirs(out_dir, exist_ok=True)
    rows: List[Dict] = []
    for name, path in targets.items():
        image = load_image(path)
        binary, thr = binarise(image, method=method, inverted=inverted, thresh_value=thresh_value)
        out_path = os.path.join(out_dir, name)
        save_binary(out_path, binary)
        logger.info("%s -> %s (threshold %.2f)", path, out_path, thr)
        rows.append({
            "file": os.path.basename(path),
            "method": method,
            "inverted": bool(inverted),
            "threshold": float(thr),
            **summarise(binary),
        })
    if out_json:
        save_json(out_json, {"results": rows})
    return rows
