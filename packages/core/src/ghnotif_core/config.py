import os
from pathlib import Path
from typing import Optional

import yaml

from ghnotif_core.models import PULL_REQUEST, FilterConfig

DEFAULT_CONFIG: dict = {
    "repo": None,  # None = every repository; "owner/name" to restrict
    "type": PULL_REQUEST,
    "title_width": 80,
    "all_pages": True,  # False = only the first page of the listing
}


def load_config(config_path: str = ".ghnotif.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .ghnotif.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    try:
        config["title_width"] = int(config["title_width"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"title_width must be an integer, got {config['title_width']!r}") from e

    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


def build_filters(
    config: dict,
    subject_state: Optional[str] = None,
    include_read: bool = False,
    unsubscribe_unread: bool = False,
) -> FilterConfig:
    """Build the FilterConfig for one command invocation."""
    return FilterConfig(
        subject_type=config.get("type") or PULL_REQUEST,
        repository=config.get("repo") or None,
        subject_state=subject_state or None,
        include_read=include_read,
        unsubscribe_unread=unsubscribe_unread,
    )
