from dataclasses import dataclass, field

from snapround.domain.entities.geometry import Coord
from snapround.errors import NodingInvariantError

# leaf id -> final noded coordinates
NodedResult = dict[int, tuple[Coord, ...]]


@dataclass
class SegmentNode:
    segment_index: int
    frac: float  # position along the segment, 0..1
    coord: Coord


@dataclass
class Fragment:
    """
    A tagged linear piece extracted from one LineString leaf.
    Noders insert nodes into it; the vertex sequence itself never changes.
    """

    coords: tuple[Coord, ...]
    tag: int
    nodes: list[SegmentNode] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self.coords)

    @property
    def num_segments(self) -> int:
        return max(0, len(self.coords) - 1)

    def segment(self, i: int) -> tuple[Coord, Coord]:
        return self.coords[i], self.coords[i + 1]

    def add_node(self, segment_index: int, coord: Coord) -> None:
        if not 0 <= segment_index < self.num_segments:
            raise NodingInvariantError(
                f"fragment {self.tag}: segment index {segment_index} out of range "
                f"[0, {self.num_segments})"
            )
        (x0, y0), (x1, y1) = self.segment(segment_index)
        dx, dy = x1 - x0, y1 - y0
        d2 = dx * dx + dy * dy
        frac = 0.0 if d2 == 0 else ((coord[0] - x0) * dx + (coord[1] - y0) * dy) / d2
        self.nodes.append(SegmentNode(segment_index, frac, (coord[0], coord[1])))

    def noded_coordinates(self) -> tuple[Coord, ...]:
        """Vertices with inserted nodes, ordered along each segment, repeats removed."""
        if not self.nodes:
            return self.coords
        by_seg: dict[int, list[SegmentNode]] = {}
        for n in self.nodes:
            by_seg.setdefault(n.segment_index, []).append(n)

        out: list[Coord] = []

        def push(c: Coord):
            if not out or out[-1] != c:
                out.append(c)

        for i in range(self.num_segments):
            push(self.coords[i])
            for n in sorted(by_seg.get(i, ()), key=lambda n: (n.frac, n.coord)):
                push(n.coord)
        push(self.coords[-1])
        return tuple(out)
