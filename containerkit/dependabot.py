"""Dependabot configuration: reading, writing and registering examples."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_MAIN_MODULE_DIR = "/"
_COMPOSE_MODULE_DIR = "/modules/compose"


@dataclass
class Schedule:
    """How often Dependabot checks for updates."""

    interval: str = ""


@dataclass
class Update:
    """One Dependabot update entry."""

    package_ecosystem: str = ""
    directory: str = ""
    schedule: Schedule = field(default_factory=Schedule)
    open_pull_requests_limit: int = 0
    rebase_strategy: str = ""


@dataclass
class DependabotConfig:
    """The contents of a dependabot.yml file."""

    version: int = 0
    updates: list[Update] = field(default_factory=list)


def new_update(example: str) -> Update:
    """Return the update entry for the example module named *example*."""
    return Update(
        package_ecosystem="gomod",
        directory="/examples/" + example,
        schedule=Schedule(interval="weekly"),
        open_pull_requests_limit=3,
        rebase_strategy="disabled",
    )


def dependabot_config_file(root_dir: str | os.PathLike[str]) -> Path:
    """Return the path of the Dependabot configuration under *root_dir*."""
    return Path(root_dir) / ".github" / "dependabot.yml"


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping")
    return value


def _update_from_dict(data: Any) -> Update:
    data = _mapping(data, "an update entry")
    schedule = _mapping(data.get("schedule"), "a schedule")
    return Update(
        package_ecosystem=data.get("package-ecosystem") or "",
        directory=data.get("directory") or "",
        schedule=Schedule(interval=schedule.get("interval") or ""),
        open_pull_requests_limit=int(data.get("open-pull-requests-limit") or 0),
        rebase_strategy=data.get("rebase-strategy") or "",
    )


def _update_to_dict(update: Update) -> dict[str, Any]:
    return {
        "package-ecosystem": update.package_ecosystem,
        "directory": update.directory,
        "schedule": {"interval": update.schedule.interval},
        "open-pull-requests-limit": update.open_pull_requests_limit,
        "rebase-strategy": update.rebase_strategy,
    }


def read_dependabot_config(root_dir: str | os.PathLike[str]) -> DependabotConfig:
    """Read and parse the Dependabot configuration under *root_dir*."""
    text = dependabot_config_file(root_dir).read_text(encoding="utf-8")
    data = _mapping(yaml.safe_load(text), "the dependabot configuration")
    return DependabotConfig(
        version=int(data.get("version") or 0),
        updates=[_update_from_dict(item) for item in data.get("updates") or []],
    )


def write_dependabot_config(
    root_dir: str | os.PathLike[str], config: DependabotConfig
) -> None:
    """Write *config* as the Dependabot configuration under *root_dir*."""
    data = {
        "version": config.version,
        "updates": [_update_to_dict(update) for update in config.updates],
    }
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    dependabot_config_file(root_dir).write_text(text, encoding="utf-8")


def generate_dependabot_updates(root_dir: str | os.PathLike[str], example_lower: str) -> None:
    """Add an update entry for *example_lower*, keeping examples sorted.

    The first two entries (the main and the compose modules) stay in front.
    """
    config = read_dependabot_config(root_dir)
    updates = config.updates
    if len(updates) < 2:
        raise ValueError("dependabot updates must start with the main and compose modules")

    example_updates = [
        update
        for update in updates
        if update.directory not in (_MAIN_MODULE_DIR, _COMPOSE_MODULE_DIR)
    ]
    example_updates.append(new_update(example_lower))
    example_updates.sort(key=lambda update: update.directory)

    config.updates = [updates[0], updates[1], *example_updates]
    write_dependabot_config(root_dir, config)