"""Label propagation from images onto containers."""

from typing import Dict, Optional

from .constants import SAIL_LABEL


def propagate_labels(labels: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Return every sail label in labels, verbatim.

    The engine flattens labels across an image's layers, so a hat image
    carries forward whatever its base declared without any special handling.
    """
    return {k: v for k, v in (labels or {}).items() if k.startswith(SAIL_LABEL)}
