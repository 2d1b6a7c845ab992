"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables, from action
inputs (INPUT_*) or from files (Docker secrets). Never put real tokens
in config files committed to the repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERSION_PATTERN = r"<version>(.*?)</version>"


def _read_secret(env_keys: tuple[str, ...], file_env_key: str) -> str | None:
    """Read secret from the first set env var or from file path in env (e.g.
    Docker secrets)."""
    for env_key in env_keys:
        value = _current_env.get(env_key)
        if value:
            return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or workflow token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    repository: str | None = Field(default=None, description="Target repo e.g. owner/repo")


class ResolverConfig(BaseSettings):
    """Label matching and development-branch version lookup."""

    model_config = SettingsConfigDict(env_prefix="RESOLVER_", extra="ignore")

    label_prefix: str = Field(default="merge:", description="Labels with this prefix carry a version")
    develop_branch: str = Field(default="develop", description="Development branch name")
    manifest_path: str = Field(default="pom.xml", description="Build manifest holding the version")
    version_pattern: str = Field(
        default=DEFAULT_VERSION_PATTERN,
        description="Regex with one group capturing the version in the manifest",
    )
    version_prefix: str = Field(default="v", description="Prepended to the manifest version")
    create_pull_requests: bool = Field(
        default=False,
        description="Open a merge PR from each resolved branch into the merged PR's base",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env, action input or Docker
        secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret(("GITHUB_TOKEN", "INPUT_GITHUB_TOKEN"), "GITHUB_TOKEN_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file is not an error: defaults and GITHUB_*, RESOLVER_*,
    LOGGING_* env vars apply. Secrets: GITHUB_TOKEN, INPUT_GITHUB_TOKEN or
    GITHUB_TOKEN_FILE.
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("merge-resolver.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    github = GitHubConfig(**(raw.get("github") or {}))
    resolver = ResolverConfig(**(raw.get("resolver") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    return AppConfig(github=github, resolver=resolver, logging=logging)
