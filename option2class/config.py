"""
Transpiler configuration.

Defaults can be overridden from a JSON file given on the command line or via
the ``OPTION2CLASS_CONFIG`` environment variable.
"""

import json
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from .utils.exceptions import TranspileError
from .utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "OPTION2CLASS_CONFIG"


@dataclass(frozen=True)
class TranspilerConfig:
    # carry options the converter cannot restructure into @Component({...})
    keep_unsupported_options: bool = True
    output_extension: str = "tsx"
    # class name when neither `name` nor a file name is available
    default_component_name: str = "Component"
    log_level: str = "INFO"


def load_config(path: Optional[str] = None) -> TranspilerConfig:
    """
    Load configuration, falling back to the defaults.

    Args:
        path: JSON file path; the ``OPTION2CLASS_CONFIG`` variable is used
            when omitted

    Returns:
        The merged configuration

    Raises:
        TranspileError: if the file cannot be read or is not a JSON object
    """
    config = TranspilerConfig()
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
    except (OSError, ValueError) as e:
        raise TranspileError(f"Could not load config {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise TranspileError(f"Config {path} must contain a JSON object")

    known = {f.name for f in fields(TranspilerConfig)}
    for key in overrides:
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")

    logger.debug(f"Loaded config from {path}")
    return replace(config, **{k: v for k, v in overrides.items() if k in known})
