import os
import yaml
import logging
import argparse
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(os.getenv("SAGLEARN_CONFIG", "saglearn_config.yaml"))

DEFAULTS = {
    "device": "cpu",
    "dtype": "float64",
    "weight_vector": "scaled",
    "drift_lower": None,
    "drift_upper": None,
    "log_level": "WARNING",
}


def load_yaml_config(path: str = None) -> dict:
    """Load configuration from a YAML file."""
    cfg_path = Path(path or os.getenv("SAGLEARN_CONFIG", DEFAULT_CONFIG_PATH))
    if not cfg_path.exists():
        logger.info("No config found at %s. Using defaults.", cfg_path)
        return {}
    with open(cfg_path, "r") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {cfg_path} must contain a mapping, got {type(cfg).__name__}")
    return cfg


def parse_cli_args(argv=None, strict=True) -> dict:
    """
    Parse CLI overrides (used for runtime config tweaking).

    Malformed overrides raise ValueError when `strict`, otherwise they are
    logged and ignored so that importing the library never exits the host program.
    """
    parser = argparse.ArgumentParser(description="SagLearn Config Override", allow_abbrev=False,
                                     add_help=False, exit_on_error=False)

    parser.add_argument("--config", type=str, help="Path to YAML config file")
    parser.add_argument("--device", type=str, choices=["cpu", "gpu"], help="Device to use")
    parser.add_argument("--dtype", type=str, choices=["float32", "float64"], help="Floating point precision")
    parser.add_argument("--weight_vector", type=str, choices=["naive", "scaled"], help="Weight vector variant")
    parser.add_argument("--drift_lower", type=float, help="Lower bound of the safe pending-scale band")
    parser.add_argument("--drift_upper", type=float, help="Upper bound of the safe pending-scale band")
    parser.add_argument("--log_level", type=str, help="Level of the SagLearn logger")

    try:
        args, _ = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        if strict:
            raise ValueError(f"Invalid SagLearn option: {e}") from e
        logger.warning("Ignoring SagLearn command line overrides: %s", e)
        return {}

    cli_config = {}
    for key, value in vars(args).items():
        if value is not None:
            cli_config[key] = value

    return cli_config


def merge_configs(base: dict, override: dict) -> dict:
    """Merge CLI overrides into YAML base config (CLI wins)."""
    final = base.copy()
    final.update(override)
    return final


def load_config(argv=None, strict=True) -> dict:
    """Main config loader: defaults + YAML + CLI overrides."""
    cli = parse_cli_args(argv, strict=strict)
    yaml_cfg = load_yaml_config(cli.get("config"))
    return merge_configs(merge_configs(DEFAULTS, yaml_cfg), cli)

# === The global CONFIG dict you import elsewhere ===
CONFIG = load_config(strict=False)
