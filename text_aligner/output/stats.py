from typing import Dict, Any, List, Sequence
import numpy as np


def padding_per_line(original: Sequence[str], aligned: Sequence[str]) -> List[int]:
    """Spaces added to each line by alignment"""
    if len(original) != len(aligned):
        raise ValueError(
            f"line count mismatch: {len(original)} original vs {len(aligned)} aligned"
        )
    return [len(a) - len(o) for o, a in zip(original, aligned)]


def padding_statistics(
    original: Sequence[str], aligned: Sequence[str]
) -> Dict[str, Any]:
    """Summarize how much padding alignment introduced.

    Args:
        original: Lines before alignment
        aligned: Lines after alignment, same order

    Returns:
        Dict with per-line padding, total, mean, stdev, min, max and the
        number of lines left untouched
    """
    padding = padding_per_line(original, aligned)
    if not padding:
        return {
            "per_line": [],
            "total": 0,
            "mean": 0.0,
            "stdev": 0.0,
            "min": 0,
            "max": 0,
            "untouched": 0,
        }

    arr = np.asarray(padding, dtype=np.int64)
    return {
        "per_line": padding,
        "total": int(arr.sum()),
        "mean": round(float(arr.mean()), 4),
        "stdev": round(float(arr.std()), 4),
        "min": int(arr.min()),
        "max": int(arr.max()),
        "untouched": int(np.count_nonzero(arr == 0)),
    }
