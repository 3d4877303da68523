from typing import Protocol, runtime_checkable

from snapround.domain.entities.fragment import Fragment
from snapround.domain.entities.geometry import Geometry


# ------------- Collaborators --------------------
@runtime_checkable
class Noder(Protocol):
    """
    Responsibilities:
      • Find every proper and improper intersection between the fragments.
      • Insert a grid-snapped node into each fragment passing through it
        (Fragment.add_node), never reordering or reversing a fragment.
    Ordering of nodes along a shared segment is the Noder's business.
    """

    def compute_nodes(self, fragments: list[Fragment]) -> None: ...


@runtime_checkable
class Repairer(Protocol):
    """
    Turn a topologically invalid geometry into a valid one.
    Total: always returns some geometry, possibly empty. The result may
    restructure rings and need not keep the input vertices.
    """

    def repair(self, geom: Geometry) -> Geometry: ...


# ------------- Observability --------------------
class PipelineHooks(Protocol):
    def run_start(self, *, geom_type, num_points, linework_only): ...
    def run_end(self, *, geom_type, wall_ms): ...
    def extracted(self, *, fragments, ms): ...
    def collapsed(self, *, tag, num_points): ...
    def noded(self, *, fragments, surviving, nodes, ms): ...
    def repaired(self, *, geom_type, ms): ...
    def error(self, *, reason: str, **kw): ...
