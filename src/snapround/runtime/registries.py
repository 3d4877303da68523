# runtime/registries.py
from collections.abc import Callable

from snapround.app.protocols import Noder, Repairer
from snapround.config.models import (
    NoderIndexedModel,
    NoderSimpleModel,
    NoderUnion,
    RepairerBufferModel,
    RepairerMakeValidModel,
    RepairerUnion,
)
from snapround.domain.noding.snap_rounders import IndexedSnapRounder, SimpleSnapRounder
from snapround.io.repair import BufferRepairer, MakeValidRepairer

NoderFactory = Callable[[NoderUnion, dict], Noder]
RepairerFactory = Callable[[RepairerUnion, dict], Repairer]

_noder_registry: dict[str, NoderFactory] = {}
_repairer_registry: dict[str, RepairerFactory] = {}


# ------------------- Noders ---------------------------


def register_noder(kind: str):
    def deco(fn: NoderFactory):
        _noder_registry[kind] = fn
        return fn

    return deco


def make_noder(cfg: NoderUnion, *, deps: dict) -> Noder:
    try:
        factory = _noder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown noder kind {cfg.kind!r}")
    return factory(cfg, deps)


@register_noder("simple")
def _make_simple(cfg: NoderSimpleModel, deps):
    return SimpleSnapRounder(deps["grid"])


@register_noder("indexed")
def _make_indexed(cfg: NoderIndexedModel, deps):
    return IndexedSnapRounder(deps["grid"], node_capacity=cfg.node_capacity)


# ------------------- Repairers ---------------------------


def register_repairer(kind: str):
    def deco(fn: RepairerFactory):
        _repairer_registry[kind] = fn
        return fn

    return deco


def make_repairer(cfg: RepairerUnion, *, deps: dict | None = None) -> Repairer:
    try:
        factory = _repairer_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown repairer kind {cfg.kind!r}")
    return factory(cfg, deps or {})


@register_repairer("buffer")
def _make_buffer(cfg: RepairerBufferModel, deps):
    return BufferRepairer()


@register_repairer("make_valid")
def _make_make_valid(cfg: RepairerMakeValidModel, deps):
    return MakeValidRepairer(method=cfg.method, keep_collapsed=cfg.keep_collapsed)
