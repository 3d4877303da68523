# snapround/app/build.py
from collections.abc import Mapping

from snapround.config.models import SnapRoundModel
from snapround.domain.precision import PrecisionGrid
from snapround.io.pipeline_logging import PipelineLogging
from snapround.pipeline.hooks import NoopHooks
from snapround.pipeline.snap_rounder import GeometrySnapRounder
from snapround.runtime.registries import make_noder, make_repairer


def build(cfg: SnapRoundModel | Mapping, *, use_logging: bool = True) -> GeometrySnapRounder:
    # 0) Validate config
    model = cfg if isinstance(cfg, SnapRoundModel) else SnapRoundModel.model_validate(cfg)

    # 1) Grid
    grid = PrecisionGrid(model.precision.effective_scale)

    # 2) Collaborators
    noder = make_noder(model.noder, deps={"grid": grid})
    repairer = make_repairer(model.repairer)

    # 3) Hooks
    hooks = (
        PipelineLogging(run_id=model.log.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    return GeometrySnapRounder(
        grid,
        noder=noder,
        repairer=repairer,
        linework_only=model.linework_only,
        keep_points=model.keep_points,
        hooks=hooks,
    )
