from snapround.domain.editing import iter_lines
from snapround.domain.entities.fragment import Fragment
from snapround.domain.entities.geometry import Geometry
from snapround.domain.precision import PrecisionGrid, round_coords


def extract_fragments(geom: Geometry, grid: PrecisionGrid) -> list[Fragment]:
    """
    One Fragment per non-empty LineString leaf (polygon rings included), with
    coordinates rounded to ``grid`` and tagged by leaf id. Points and empty
    lines contribute nothing.
    """
    fragments: list[Fragment] = []
    for leaf_id, line in iter_lines(geom):
        if line.is_empty:
            continue
        fragments.append(Fragment(round_coords(line.coords, grid), tag=leaf_id))
    return fragments
