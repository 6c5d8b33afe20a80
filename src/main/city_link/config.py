import copy
import logging
from typing import Optional

import yaml

from .errors import CityLinkError

DEFAULT_CONFIG = {
    "logging": {
        "level": "WARNING",
        "format": "%(levelname)s %(name)s: %(message)s",
    },
    "output": {
        "prefix": "out-",
    },
    "limits": {
        "max_city_count": 4096,
    },
}


def apply_patch(original: dict, patch: dict) -> dict:
    result = copy.deepcopy(original)
    for key in patch.keys():
        if key in original and isinstance(original[key], dict) and isinstance(patch[key], dict):
            result[key] = apply_patch(original[key], patch[key])
        else:
            result[key] = copy.deepcopy(patch[key])
    return result


def read_config(path: Optional[str]) -> dict:
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(path, 'r') as file:
        patch = yaml.safe_load(file)
    if patch is None:
        patch = {}
    if not isinstance(patch, dict):
        raise CityLinkError(f"config file {path} must contain a mapping")
    return apply_patch(DEFAULT_CONFIG, patch)


def configure_logging(config: dict) -> None:
    logging.basicConfig(
        level=config["logging"]["level"],
        format=config["logging"]["format"],
    )
