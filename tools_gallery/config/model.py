from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_UI_TITLE = "AI Tools Gallery"
DEFAULT_SUBTITLE = "Browse and search the tool catalog"
DEFAULT_SOURCE = "tools.csv"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - source: URL (http/https) or filesystem path of the dataset; relative paths
      are already resolved against the config root
    - fetch_timeout: seconds before an HTTP fetch gives up; None waits forever
    """
    ui_title: str
    subtitle: str
    source: str
    fetch_timeout: Optional[float] = None
    config_root: Optional[Path] = None
