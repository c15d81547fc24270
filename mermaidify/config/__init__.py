from .loader import load_config
from .models import (
    DiagramConfig,
    HooksConfig,
    MermaidifyConfig,
    SiteConfig,
)

__all__ = [
    "DiagramConfig",
    "HooksConfig",
    "MermaidifyConfig",
    "SiteConfig",
    "load_config",
]
