"""
Configuration — loads settings from .snippetfmt.yaml, environment variables,
and built-in defaults (in that priority order: CLI args > env > YAML > defaults).
"""

import os

import yaml


_DEFAULTS = {
    "engine": "command",
    "engine_command": "palantir-java-format",
    "engine_timeout": 30.0,
    "fix_imports": True,
    "reflow_strings": True,
    "log_dir": ".snippetfmt/logs",
    "log_level": "INFO",
}

# Config file search locations
_CONFIG_FILENAMES = [".snippetfmt.yaml", ".snippetfmt.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


class Config:
    """Snippet formatter configuration.

    Settings are resolved in priority order:
    1. CLI arguments (handled by caller)
    2. Environment variables (``SNIPPETFMT_*``)
    3. .snippetfmt.yaml config file
    4. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, default, cast=str):
            env_val = os.getenv(env_key)
            if env_val is not None:
                return cast(env_val)
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return cast(yaml_val)
            return default

        def _get_bool(env_key: str, yaml_key: str, default: bool) -> bool:
            env_val = os.getenv(env_key)
            if env_val is not None:
                return env_val.lower() == "true"
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return bool(yaml_val)
            return default

        self.ENGINE = _get("SNIPPETFMT_ENGINE", "engine", _DEFAULTS["engine"])

        # The command may be a shell-style string or a YAML list
        command = yd.get("engine_command")
        env_command = os.getenv("SNIPPETFMT_ENGINE_COMMAND")
        if env_command is not None:
            command = env_command
        if isinstance(command, list):
            command = [str(part) for part in command]
        elif command is None:
            command = _DEFAULTS["engine_command"]
        else:
            command = str(command)
        self.ENGINE_COMMAND: str | list[str] = command

        self.ENGINE_TIMEOUT = _get("SNIPPETFMT_ENGINE_TIMEOUT", "engine_timeout",
                                   _DEFAULTS["engine_timeout"], cast=float)
        self.FIX_IMPORTS = _get_bool("SNIPPETFMT_FIX_IMPORTS", "fix_imports",
                                     _DEFAULTS["fix_imports"])
        self.REFLOW_STRINGS = _get_bool("SNIPPETFMT_REFLOW_STRINGS", "reflow_strings",
                                        _DEFAULTS["reflow_strings"])

        self.LOG_DIR = _get("SNIPPETFMT_LOG_DIR", "log_dir", _DEFAULTS["log_dir"])
        self.LOG_LEVEL = _get("SNIPPETFMT_LOG_LEVEL", "log_level",
                              _DEFAULTS["log_level"]).upper()

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
