from pydantic import BaseModel, Field
from typing import Literal


class LimitsConfig(BaseModel):
    path_max: int = Field(default=511, gt=0)
    dir_name_max: int = Field(default=511, gt=0)
    base_name_max: int = Field(default=63, gt=0)
    node_name_max: int = Field(default=63, gt=0)
    max_nodes: int | None = Field(default=None, gt=0)


class OutputConfig(BaseModel):
    show_tree: bool = True
    color: bool = True


class TreespaceConfig(BaseModel):
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
