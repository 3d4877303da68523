from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PrecisionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    scale: float | None = None
    grid_size: float | None = None  # alternative to scale: cell width

    @field_validator("scale", "grid_size")
    @classmethod
    def _positive(cls, v):
        if v is None:
            return v
        if not isfinite(v) or v <= 0:
            raise ValueError("must be a positive finite number")
        return v

    @model_validator(mode="after")
    def _one_of(self):
        if self.scale is None and self.grid_size is None:
            self.scale = 1.0
        elif self.scale is not None and self.grid_size is not None:
            raise ValueError("give either scale or grid_size, not both")
        return self

    @property
    def effective_scale(self) -> float:
        return self.scale if self.scale is not None else 1.0 / self.grid_size


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    run_id: str = "local"


# ----------------- NODERS ---------------------


class NoderSimpleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["simple"] = "simple"


class NoderIndexedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["indexed"] = "indexed"
    node_capacity: int = Field(default=10, ge=2)


NoderUnion = Annotated[
    NoderSimpleModel | NoderIndexedModel,
    Field(discriminator="kind"),
]

# ----------------- REPAIRERS ---------------------


class RepairerBufferModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["buffer"] = "buffer"


class RepairerMakeValidModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["make_valid"] = "make_valid"
    method: Literal["linework", "structure"] = "linework"
    keep_collapsed: bool = True  # only used by method="structure"


RepairerUnion = Annotated[
    RepairerBufferModel | RepairerMakeValidModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class SnapRoundModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    precision: PrecisionModel = Field(default_factory=PrecisionModel)
    linework_only: bool = False
    keep_points: bool = False
    noder: NoderUnion = Field(default_factory=NoderIndexedModel)
    repairer: RepairerUnion = Field(default_factory=RepairerBufferModel)
    log: LogModel = LogModel()
