# snapround/domain/noding/coordinator.py
from collections.abc import Sequence

from snapround.app.protocols import Noder, PipelineHooks
from snapround.domain.entities.fragment import Fragment, NodedResult
from snapround.errors import NodingInvariantError


def node_fragments(
    fragments: list[Fragment], noder: Noder, *, hooks: PipelineHooks | None = None
) -> NodedResult:
    """
    Run ``noder`` over ``fragments`` and collect the noded coordinates per tag,
    in fragment order. Fragments left with fewer than 2 points are collapsed
    and omitted.
    """
    expected = {f.tag for f in fragments}

    noder.compute_nodes(fragments)

    result: NodedResult = {}
    seen: set[int] = set()
    for frag in fragments:
        tag = frag.tag
        if not isinstance(tag, int) or isinstance(tag, bool) or tag < 0:
            raise NodingInvariantError(f"fragment has invalid tag {tag!r}")
        if tag not in expected:
            raise NodingInvariantError(f"fragment tag {tag} does not map to an extracted line")
        if tag in seen:
            raise NodingInvariantError(f"fragment tag {tag} appears more than once")
        seen.add(tag)

        pts = frag.noded_coordinates()
        if not isinstance(pts, Sequence):
            raise NodingInvariantError(
                f"fragment {tag}: noded coordinates are {type(pts).__name__}, not a sequence"
            )
        if len(pts) < 2:
            if hooks is not None:
                hooks.collapsed(tag=tag, num_points=len(pts))
            continue
        result[tag] = tuple(pts)
    return result
