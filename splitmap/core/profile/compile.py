"""Turn a profile into its electrical keymap and hand map.

Compilation runs the lenient engine and, alongside it, the validation layer.
Issues are logged; with ``strict=True`` they raise instead. Results are
cached per profile, so each keyboard is compiled at most once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from splitmap.core.matrix.annotator import annotate
from splitmap.core.matrix.parser import parse_coordinates
from splitmap.core.matrix.projector import project
from splitmap.core.matrix.types import NO_OP, Action
from splitmap.core.matrix.validation import (
    IssueKind,
    MatrixMapError,
    validate_keymap,
    validate_matrix_map,
)

from .model import CompiledKeymap, KeyboardProfile

logger = logging.getLogger(__name__)


def _collect_issues(profile: KeyboardProfile, coordinates) -> list:
    issues = validate_matrix_map(
        profile.matrix_map,
        rows=profile.rows,
        cols=profile.cols,
        expected_keys=profile.keys,
        capacity=profile.capacity,
    )
    # Coordinate range/duplicate issues are already covered above.
    issues.extend(
        i
        for i in validate_keymap(coordinates, profile.physical_keymap, rows=profile.rows, cols=profile.cols)
        if i.kind is IssueKind.LAYER_LENGTH_MISMATCH
    )
    return issues


@lru_cache(maxsize=None)
def compile_profile(profile: KeyboardProfile, *, strict: bool = False, no_op: Action = NO_OP) -> CompiledKeymap:
    coordinates = parse_coordinates(profile.matrix_map, capacity=profile.capacity)
    issues = _collect_issues(profile, coordinates)

    if issues:
        if strict:
            raise MatrixMapError(issues)
        for issue in issues:
            logger.warning("Profile '%s': %s", profile.name, issue)

    electrical = project(
        coordinates,
        profile.physical_keymap,
        rows=profile.rows,
        cols=profile.cols,
        no_op=no_op,
    )
    hands = annotate(coordinates, rows=profile.rows, cols=profile.cols)

    logger.debug(
        "Compiled profile '%s': %d keys, %d layers, %dx%d matrix",
        profile.name,
        len(coordinates),
        len(electrical),
        profile.rows,
        profile.cols,
    )
    return CompiledKeymap(
        profile=profile,
        coordinates=coordinates,
        electrical=electrical,
        hands=hands,
        issues=tuple(issues),
    )
