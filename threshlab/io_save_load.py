# io_save_load.py
# load/save helpers

from __future__ import annotations

from PIL import Image
import numpy as np, pathlib as _p

def load_image(path: str, mode: str | None = None) -> np.ndarray:
    """Image file -> [H,W,C] array. Grayscale stays 1 channel, everything else RGB."""
    with Image.open(path) as img:
        if mode is None:
            mode = 'L' if img.mode in ('1', 'L', 'I', 'F', 'I;16') else 'RGB'
        arr = np.array(img.convert(mode))
    return arr[..., None] if arr.ndim == 2 else arr

def save_binary(path: str, binary: np.ndarray):
    _p.Path(path).parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(binary[..., 0].astype(np.uint8)).save(path)

def save_json(path: str, obj: dict):
    import json, os
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)
