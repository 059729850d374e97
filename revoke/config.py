"""Configuration management for revoke."""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PUSH_CHOICES = ("ask", "always", "never")

DEFAULT_CONFIG: Dict[str, Any] = {
    "default": {"remote": "origin", "repo_path": None},
    "messages": {
        "revert": 'Revoke "{message}"',
        "revive": "Revive '{branch}' changes",
    },
    "preferences": {"push": "ask"},
}


def get_config_file() -> Path:
    """Get configuration file path, honoring REVOKE_CONFIG."""
    override = os.getenv("REVOKE_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".revoke" / "config.yml"


def load_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file, filling in defaults for missing keys.

    Raises:
        ValueError: If the file is not a YAML mapping or a message template is broken
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file = config_file or get_config_file()
    if not config_file.exists():
        return config

    try:
        with open(config_file) as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config file: {config_file}\n{e}") from e

    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid config file: {config_file} (expected a mapping)")

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)

    validate_messages(config)
    return config


def get_remote(config: Dict[str, Any]) -> str:
    """Get configured remote name."""
    remote = config.get("default", {}).get("remote")
    return remote if isinstance(remote, str) and remote else "origin"


def get_repo_path(config: Dict[str, Any]) -> Optional[str]:
    """Get configured repository path."""
    repo_path = config.get("default", {}).get("repo_path")
    return repo_path if isinstance(repo_path, str) else None


def get_push_preference(config: Dict[str, Any]) -> Optional[bool]:
    """
    Get the configured answer to the final push question.

    Returns:
        True for "always", False for "never", None to ask the operator
    """
    preference = config.get("preferences", {}).get("push", "ask")
    if preference not in PUSH_CHOICES:
        raise ValueError(
            f"Invalid push preference: {preference!r} (expected one of {', '.join(PUSH_CHOICES)})"
        )
    return {"ask": None, "always": True, "never": False}[preference]


def validate_messages(config: Dict[str, Any]) -> None:
    """Check that both commit message templates format with their own fields."""
    try:
        format_revert_message(config, "Merge branch 'sample'")
        format_revive_message(config, "sample")
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(
            "Invalid message template: revert may only use {message}, "
            f"revive may only use {{branch}} ({e!r})"
        ) from e


def format_revert_message(config: Dict[str, Any], merge_message: str) -> str:
    """Build the commit message for the revert commit."""
    template = config.get("messages", {}).get("revert") or DEFAULT_CONFIG["messages"]["revert"]
    return str(template).format(message=merge_message)


def format_revive_message(config: Dict[str, Any], branch_name: str) -> str:
    """Build the commit message for the revived branch commit."""
    template = config.get("messages", {}).get("revive") or DEFAULT_CONFIG["messages"]["revive"]
    return str(template).format(branch=branch_name)
