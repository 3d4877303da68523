# snapround/errors.py


class SnapRoundError(Exception):
    """Base class for errors raised by the snap-rounding pipeline."""


class NodingInvariantError(SnapRoundError, RuntimeError):
    """A Noder broke its contract (bad tag, duplicate tag, bad segment index)."""


class UnsupportedComponentError(SnapRoundError, TypeError):
    """A geometry tree holds a component outside the supported kinds."""

    def __init__(self, component):
        self.component = component
        super().__init__(f"unsupported geometry component {type(component).__name__!r}")
