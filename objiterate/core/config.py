"""Configuration file loading for objiterate.

This module loads the method-name configuration from a JSON or YAML file,
with environment variables as fallback and defaults for anything unset.

Example config.json::

    {
      "objiterate": {
        "more": "has_more",
        "next": "fetch",
        "final": null
      }
    }
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from objiterate.core.schema.names import OPTIONAL_ROLES, ROLES

CONFIG_SECTION = "objiterate"
YAML_SUFFIXES = (".yaml", ".yml")


def load_config(config_path: str = "config.json") -> Dict[str, Any]:
    """Load configuration from a JSON or YAML file.

    The format is chosen by file suffix: ``.yaml``/``.yml`` are parsed with
    ruamel.yaml, anything else as JSON. Returns empty dict if the file
    doesn't exist, is invalid, or does not hold a mapping.

    Args:
        config_path: Path to the config file (default: "config.json")

    Returns:
        Configuration dictionary, or empty dict if file not found/invalid
    """
    path = Path(config_path)

    if not path.exists():
        return {}

    try:
        with open(path, "r") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = YAML(typ="safe").load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, YAMLError, IOError):
        # Return empty dict on error, allowing code to use defaults
        return {}

    if not isinstance(data, dict):
        return {}
    return data


def env_var_for(role: str) -> str:
    """Environment variable consulted for ``role`` (e.g. OBJITERATE_MORE)."""
    return f"{CONFIG_SECTION.upper()}_{role.upper()}"


def load_method_names(
    config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Optional[str]]:
    """Read the role bindings present in the config or environment.

    For each role the ``objiterate`` section of the config is checked first,
    then the matching OBJITERATE_* variable. Only roles with a value are
    returned, so the result can be applied on top of the current bindings.
    An explicit ``null`` for ``init`` or ``final`` disables that hook; a
    ``null`` for a required role counts as unset.

    Args:
        config_path: Path to the config file (ignored if config is given)
        config: Already loaded config dict

    Returns:
        Mapping of role name to method name for the roles that were set
    """
    if config is None:
        config = load_config(config_path) if config_path else load_config()

    section = config.get(CONFIG_SECTION)
    if not isinstance(section, dict):
        section = {}

    roles: Dict[str, Optional[str]] = {}
    for role in ROLES:
        value = section.get(role)
        if value is None and role in section and role in OPTIONAL_ROLES:
            roles[role] = None
            continue
        if value is None:
            value = os.environ.get(env_var_for(role))
        if value is not None:
            roles[role] = value
    return roles
