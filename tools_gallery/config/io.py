from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from tools_gallery.config.model import (
    DEFAULT_SOURCE,
    DEFAULT_SUBTITLE,
    DEFAULT_UI_TITLE,
    GlobalConfig,
)
from tools_gallery.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_SOURCE = "TOOLS_GALLERY_SOURCE"
ENV_FETCH_TIMEOUT = "TOOLS_GALLERY_FETCH_TIMEOUT"


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def _resolve_source(raw_source: str, root: Path) -> str:
    """
    URLs are used as-is. Absolute paths are used as-is.
    Relative paths are resolved relative to the config root directory.
    """
    if is_remote(raw_source):
        return raw_source
    source_path = Path(raw_source)
    if source_path.is_absolute():
        return str(source_path)
    return str((root / source_path).resolve())


def _parse_timeout(raw: Any) -> Optional[float]:
    if raw is None or raw == "":
        return None
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"fetch_timeout must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"fetch_timeout must be positive, got {raw!r}")
    return timeout


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json

    global.json keys (all optional):

    - ui_title: title for UI, defaults to 'AI Tools Gallery'
    - subtitle: navbar subtitle
    - source: dataset URL or path, defaults to 'tools.csv' next to global.json
    - fetch_timeout: seconds, or null for no timeout

    Environment variables TOOLS_GALLERY_SOURCE and TOOLS_GALLERY_FETCH_TIMEOUT
    take precedence over the file.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a JSON object or holds invalid values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global: Dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    raw_source = os.getenv(ENV_SOURCE) or raw_global.get("source") or DEFAULT_SOURCE
    raw_timeout = os.getenv(ENV_FETCH_TIMEOUT, raw_global.get("fetch_timeout"))

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_UI_TITLE),
        subtitle=raw_global.get("subtitle", DEFAULT_SUBTITLE),
        source=_resolve_source(str(raw_source), root),
        fetch_timeout=_parse_timeout(raw_timeout),
        config_root=root,
    )
