# config_loader.py
import copy
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path=None) -> dict:
    """
    Loads the packaged defaults, then merges the user's YAML file over them.

    Parameters:
    config_path (str | Path, optional): A user configuration file.

    Returns:
    dict: The merged configuration.
    """
    with open(DEFAULT_CONFIG_PATH, "r") as f:
        config = yaml.safe_load(f)
    if config_path is None:
        return config

    with open(config_path, "r") as f:
        user_config = yaml.safe_load(f) or {}
    if not isinstance(user_config, dict):
        raise ValueError(f"Config file {config_path} must hold a mapping")
    return _merge(copy.deepcopy(config), user_config)
