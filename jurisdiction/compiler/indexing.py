"""Stable canonical index assignment.

A fresh build numbers countries in declaration order. Regenerating against
previously generated tables keeps every existing index: surviving codes keep
theirs, codes that come back get their retired index back, new codes get
numbers above anything issued before, and dropped codes are retired. An
index is never handed to a different code.
"""

import importlib.util
import logging
import os
from collections.abc import Mapping, Sequence

from jurisdiction.errors import DataIntegrityError

logger = logging.getLogger(__name__)


def assign_indices(
    alpha2_codes: Sequence[str],
    previous: Mapping[str, int] | None = None,
    retired: Mapping[str, int] | None = None,
) -> tuple[dict[str, int], dict[str, int]]:
    """Return (alpha2 -> index, retired alpha2 -> index)."""
    issued: dict[str, int] = {**(retired or {}), **(previous or {})}
    next_index = max(issued.values(), default=-1) + 1

    indices: dict[str, int] = {}
    added = 0
    for code in alpha2_codes:
        if code in issued:
            indices[code] = issued[code]
        else:
            indices[code] = next_index
            next_index += 1
            added += 1

    still_retired = {
        code: index
        for code, index in sorted(issued.items(), key=lambda item: item[1])
        if code not in indices
    }
    if issued:
        logger.info(
            "Index assignment: %d kept, %d new, %d retired",
            len(indices) - added,
            added,
            len(still_retired),
        )
    return indices, still_retired


def load_previous(output_dir: str) -> tuple[dict[str, int], dict[str, int]]:
    """Read canonical indices from previously generated tables in output_dir.

    Returns empty mappings when nothing has been generated there yet.
    """
    path = os.path.join(output_dir, "definitions.py")
    if not os.path.exists(path):
        logger.info("No previous tables at %s, numbering from scratch", path)
        return {}, {}

    spec = importlib.util.spec_from_file_location("_previous_definitions", path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
        previous = {record.alpha2: record.index for record in module.COUNTRIES}
        retired = dict(module.RETIRED)
    except (SyntaxError, ImportError, AttributeError, TypeError) as exc:
        raise DataIntegrityError("index", f"cannot read previous tables from {path}: {exc}", path) from exc

    logger.info("Loaded %d previous indices (%d retired) from %s", len(previous), len(retired), path)
    return previous, retired
