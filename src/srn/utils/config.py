"""
SRN Configuration Loader.

Loads naming and output defaults from .srn/config.yaml.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from srn.model.name import DEFAULT_SCHEME, validate_scheme
from srn.model.root import RootStrategy
from srn.utils.repo import CONFIG_DIR_NAME

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"
OUTPUT_FORMATS = ("text", "json", "yaml")


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_srn_config(root: Path) -> Dict[str, Any]:
    """
    Load .srn/config.yaml configuration file.

    The config file controls:
    - The scheme literal written as field 0
    - The default root strategy used by `srn build`
    - The default output format of the CLI

    Args:
        root: Directory containing .srn/

    Returns:
        Parsed configuration dict, or empty dict if the file doesn't exist
        or cannot be read

    Example config:
        naming:
          scheme: ern
          strategy: time_ordered
        output:
          format: text
    """
    path = config_path(root)

    if not path.exists():
        return {}

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}

    if not isinstance(config, dict):
        if config is not None:
            logger.warning("Ignoring config %s: top level must be a mapping", path)
        return {}
    return config


def get_naming_config(root: Path) -> Dict[str, Any]:
    """
    Get naming configuration.

    Args:
        root: Directory containing .srn/

    Returns:
        Dict with "scheme" (validated str) and "strategy" (RootStrategy)

    Raises:
        ValidationError: configured scheme is not a valid literal
        ValueError: configured strategy is unknown
    """
    config = load_srn_config(root)
    naming_config = dict(config.get("naming") or {})

    defaults = {
        "scheme": DEFAULT_SCHEME,
        "strategy": RootStrategy.TIME_ORDERED.value,
    }

    for key, default_value in defaults.items():
        if key not in naming_config:
            naming_config[key] = default_value

    naming_config["scheme"] = validate_scheme(naming_config["scheme"])
    naming_config["strategy"] = RootStrategy.from_name(str(naming_config["strategy"]))
    return naming_config


def get_output_config(root: Path) -> Dict[str, Any]:
    """
    Get CLI output configuration.

    Args:
        root: Directory containing .srn/

    Returns:
        Dict with "format" (one of text, json, yaml)
    """
    config = load_srn_config(root)
    output_config = dict(config.get("output") or {})

    if "format" not in output_config:
        output_config["format"] = "text"

    if output_config["format"] not in OUTPUT_FORMATS:
        logger.warning(
            "Unknown output format %r in config, using 'text'", output_config["format"]
        )
        output_config["format"] = "text"

    return output_config
