import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class DatasetModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    algorithm: Literal["bfs", "dfs", "dijkstra"] = "dijkstra"
    accessible_only: bool = False
    # one weight unit in meters; applied to every compared path alike
    meters_per_unit: float = Field(default=1.0, ge=0)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _lower(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    run_id: str = "local"
    dataset: DatasetModel | None = None
    routing: RoutingModel = Field(default_factory=RoutingModel)
    log: LogModel = Field(default_factory=LogModel)
