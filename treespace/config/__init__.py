from .loader import load_config
from .models import (
    LimitsConfig,
    OutputConfig,
    TreespaceConfig,
)

__all__ = [
    "LimitsConfig",
    "OutputConfig",
    "TreespaceConfig",
    "load_config",
]
