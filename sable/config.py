from __future__ import annotations
import logging
import os
import sys

log = logging.getLogger(__name__)

# Each nesting level costs a few Python frames in the reader and evaluator,
# so the default stays well under the interpreter's recursion limit.
DEFAULT_MAX_DEPTH = 200

# Upper bound on Python frames spent per nesting level, and frames kept in
# reserve for whatever is calling into the reader or evaluator.
FRAMES_PER_LEVEL = 4
RESERVED_FRAMES = 100


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        log.warning("Ignoring %s=%r: not an integer", var, raw)
        return default
    if value <= 0:
        log.warning("Ignoring %s=%r: must be positive", var, raw)
        return default
    return value


def depth_ceiling() -> int:
    """Deepest nesting the current recursion limit can absorb."""
    return max(1, (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL)


def get_max_depth() -> int:
    depth = int_from_env('SABLE_MAX_DEPTH', DEFAULT_MAX_DEPTH)
    ceiling = depth_ceiling()
    if depth > ceiling:
        log.warning("Capping SABLE_MAX_DEPTH=%d to %d for recursion limit %d",
                    depth, ceiling, sys.getrecursionlimit())
        return ceiling
    return depth
