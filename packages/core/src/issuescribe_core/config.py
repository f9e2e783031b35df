from pathlib import Path
from typing import Optional

import yaml

from issuescribe_core.errors import ConfigurationError

DEFAULT_CONFIG: dict = {
    "base_url": "https://api.github.com",
    "cache_file": "github-comments-fetcher-inputs.txt",
    "output_file": "comments.txt",
    "token_env": "GITHUB_ACCESS_TOKEN",
}


def load_config(config_path: str = ".issuescribe.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load settings by merging (in order of precedence):
      1. Built-in defaults
      2. .issuescribe.yml in the current directory
      3. CLI argument overrides

    The repository coordinates are not settings; they live in the parameter cache.
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read settings file {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Settings file {config_path} must contain a YAML mapping.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # Every built-in setting is a path, URL or variable name.
    for key in DEFAULT_CONFIG:
        if not isinstance(config[key], str):
            raise ConfigurationError(f"Setting {key!r} must be a string, got {config[key]!r}.")

    return config
