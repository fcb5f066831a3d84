"""Application and dotfiles-repository configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from . import logger
from .fs import Path, mkdir

BASE_DIR = "dotx"
APP_CONFIG_FILE = "config.yaml"
REPO_DIR = "dotfiles"
REPO_CONFIG_FILE = "dotx.yaml"

DEFAULT_COMMIT_MESSAGE = "update dotfiles"


class ConfigError(Exception):
    """Raised when a configuration file cannot be written or understood."""


def _home() -> str:
    return os.path.expanduser("~")


def _xdg_dir(variable: str, *default: str) -> str:
    value = os.environ.get(variable, "")
    if value and os.path.isabs(value):
        return value
    return os.path.join(_home(), *default)


def app_dir_path() -> str:
    """Directory that holds the dotx configuration."""
    return os.path.join(_xdg_dir("XDG_CONFIG_HOME", ".config"), BASE_DIR)


def app_config_file_path() -> str:
    return os.path.join(app_dir_path(), APP_CONFIG_FILE)


def repo_dir_path() -> str:
    """Directory that holds the dotfiles repository."""
    return os.path.join(_xdg_dir("XDG_DATA_HOME", ".local", "share"), BASE_DIR, REPO_DIR)


def repo_config_file_path() -> str:
    return os.path.join(repo_dir_path(), REPO_CONFIG_FILE)


def _expect_type(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data[key]
    if not isinstance(value, kind):
        raise ConfigError(f"{key}: expected {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class AppConfig:
    """Settings that control dotx itself."""

    verbose: bool = False
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    deploy_on_init: bool = False
    deploy_on_pull: bool = False

    _KEYS = {
        "verbose": ("verbose", bool),
        "commitMessage": ("commit_message", str),
        "deployOnInit": ("deploy_on_init", bool),
        "deployOnPull": ("deploy_on_pull", bool),
    }

    def update_from(self, data: Any) -> None:
        """Overwrite the settings present in a parsed YAML document."""
        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError("top level must be a mapping")
        updates = {}
        for key, (attr, kind) in self._KEYS.items():
            if key in data:
                updates[attr] = _expect_type(data, key, kind)
        for attr, value in updates.items():
            setattr(self, attr, value)


@dataclass
class Dotfile:
    """A tracked file: where it lives in the repository and where it is deployed."""

    source: str
    destination: str

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "destination": self.destination}

    @classmethod
    def from_dict(cls, data: Any) -> Dotfile:
        if not isinstance(data, dict):
            raise ConfigError("dotfile entry must be a mapping")
        source = data.get("source", "")
        destination = data.get("destination", "")
        if not isinstance(source, str) or not isinstance(destination, str):
            raise ConfigError("dotfile source and destination must be strings")
        return cls(source=source, destination=destination)


@dataclass
class RepoConfig:
    """The list of dotfiles tracked by the repository."""

    dotfiles: list[Dotfile] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, data: Any) -> RepoConfig:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("top level must be a mapping")
        entries = data.get("dotfiles") or []
        if not isinstance(entries, list):
            raise ConfigError("dotfiles must be a list")
        return cls(dotfiles=[Dotfile.from_dict(entry) for entry in entries])

    def to_yaml(self) -> str:
        document = {"dotfiles": [dotfile.to_dict() for dotfile in self.dotfiles]}
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)

    def dotfile_exists(self, source: Path) -> bool:
        """Report whether ``source`` is already deployed from the repository."""
        return any(Path(dotfile.destination) == source for dotfile in self.dotfiles)

    def write_dotfile(self, source: Path, dest: Path) -> None:
        """Record that ``source`` is now stored at ``dest`` and save the config."""
        source_path = source.abs_path.replace(_home(), "$HOME", 1)
        destination_path = dest.abs_path.replace(repo_dir_path(), "", 1)
        self.dotfiles.append(Dotfile(source=destination_path, destination=source_path))

        try:
            content = self.to_yaml()
        except yaml.YAMLError as exc:
            raise ConfigError(f"unable to marshal dotfiles config: {exc}") from exc
        try:
            with open(repo_config_file_path(), "w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            raise ConfigError(f"unable to write dotfiles config: {exc}") from exc


@dataclass
class Config:
    """Everything dotx needs to run."""

    repo_path: str
    app: AppConfig
    repo: RepoConfig


def _read_text(path: str, what: str) -> str | None:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.warn(f"error while reading {what}", error=exc)
        return None


def load_app_config() -> AppConfig:
    """Read the dotx configuration, falling back to defaults."""
    try:
        mkdir(Path(app_dir_path()))
    except OSError as exc:
        logger.error("error while creating dotx config directory", error=exc)

    config = AppConfig()
    content = _read_text(app_config_file_path(), "dotx config")
    if content is None:
        return config

    try:
        config.update_from(yaml.safe_load(content))
    except (yaml.YAMLError, ConfigError) as exc:
        logger.warn("invalid dotx config", error=exc)
    return config


def load_repo_config() -> RepoConfig:
    """Read the repository's list of dotfiles."""
    try:
        mkdir(Path(repo_dir_path()))
    except OSError as exc:
        logger.error("error while creating dotfiles directory", error=exc)

    content = _read_text(repo_config_file_path(), "dotfiles config")
    if content is None:
        return RepoConfig()

    try:
        return RepoConfig.from_yaml(yaml.safe_load(content))
    except (yaml.YAMLError, ConfigError) as exc:
        logger.warn("invalid dotfiles config", error=exc)
        return RepoConfig()


def load() -> Config:
    """Load both configurations, creating their directories when missing."""
    app = load_app_config()
    repo = load_repo_config()
    return Config(repo_path=repo_dir_path(), app=app, repo=repo)