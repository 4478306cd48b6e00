from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

NumericName = Literal["float", "float32", "float64", "longdouble", "decimal"]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class TreeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    order: int = Field(default=0, ge=0)
    numeric: NumericName = "float"

    @field_validator("order", mode="before")
    @classmethod
    def _no_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError("order must be an integer, not a bool")
        return v


class TreeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    tree: TreeModel = TreeModel()
    log: LogModel = LogModel()
