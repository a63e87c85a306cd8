"""Configuration for gai.

Values are resolved once at startup, in order of precedence:

1. Environment variables (``OPENAI_MODEL``, ``MAIN_BRANCH``, ...)
2. ``config.toml`` in the gai config directory
3. Built-in defaults

The config directory is ``$GAI_CONFIG``, else ``$XDG_CONFIG_HOME/gai``, else
``~/.config/gai``. It also holds the optional prompt override files.

Example config.toml:
  model = "gpt-4o"
  max_tokens = 4096
  temperature = 0.2
  main_branch = "develop"
  editor = "code --wait"
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gai.core.errors import ConfigError
from gai.core.prompts import PromptSet, load_prompts

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 16384
DEFAULT_TEMPERATURE = 0.0
DEFAULT_TOP_P = 1.0
DEFAULT_MAIN_BRANCH = "main"
DEFAULT_REMOTE = "origin"
DEFAULT_EDITOR = "vim"

CONFIG_FILE_NAME = "config.toml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class GaiConfig:
    """Immutable configuration threaded through every gai component.

    Attributes:
        api_key: OpenAI API key, None if not set (checked by preflight)
        model: Chat model identifier
        max_tokens: Maximum output tokens per generation
        temperature: Sampling temperature
        top_p: Nucleus sampling value
        main_branch: Branch PRs target and commit ranges are measured from
        remote: Remote pushed to and fetched from
        editor: Editor command used for the approval step
        verbose: Whether debug logging is enabled
        config_dir: Directory holding config.toml and prompt overrides
        prompts: Effective prompt texts
    """

    api_key: str | None
    model: str
    max_tokens: int
    temperature: float
    top_p: float
    main_branch: str
    remote: str
    editor: str
    verbose: bool
    config_dir: Path
    prompts: PromptSet


def resolve_config_dir(env: Mapping[str, str]) -> Path:
    """Determine the gai config directory from the environment."""
    explicit = env.get("GAI_CONFIG")
    if explicit:
        return Path(explicit).expanduser()
    xdg_config_home = env.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "gai"
    return Path.home() / ".config" / "gai"


def load_config_file(config_dir: Path) -> dict[str, Any]:
    """Parse config.toml from config_dir; empty if the file is absent."""
    cfg_path = config_dir / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return {}
    try:
        return tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e


def resolve_editor(env: Mapping[str, str], file_value: object) -> str:
    """Pick the editor: GAI_EDITOR, config.toml, VISUAL, EDITOR, then vim."""
    for candidate in (
        env.get("GAI_EDITOR"),
        str(file_value) if file_value else None,
        env.get("VISUAL"),
        env.get("EDITOR"),
    ):
        if candidate and candidate.strip():
            return candidate.strip()
    return DEFAULT_EDITOR


def load_config(env: Mapping[str, str]) -> GaiConfig:
    """Build the GaiConfig for this invocation.

    Args:
        env: Environment mapping (os.environ at the CLI entry point)

    Raises:
        ConfigError: If a value cannot be parsed
    """
    config_dir = resolve_config_dir(env)
    file_values = load_config_file(config_dir)

    return GaiConfig(
        api_key=env.get("OPENAI_API_KEY") or None,
        model=_pick_str(env, "OPENAI_MODEL", file_values, "model", DEFAULT_MODEL),
        max_tokens=_pick_int(env, "OPENAI_MAX_TOKENS", file_values, "max_tokens", DEFAULT_MAX_TOKENS),
        temperature=_pick_float(
            env, "OPENAI_TEMPERATURE", file_values, "temperature", DEFAULT_TEMPERATURE
        ),
        top_p=_pick_float(env, "OPENAI_TOP_P", file_values, "top_p", DEFAULT_TOP_P),
        main_branch=_pick_str(env, "MAIN_BRANCH", file_values, "main_branch", DEFAULT_MAIN_BRANCH),
        remote=_pick_str(env, "GAI_REMOTE", file_values, "remote", DEFAULT_REMOTE),
        editor=resolve_editor(env, file_values.get("editor")),
        verbose=_parse_bool("VERBOSE", env.get("VERBOSE", "")),
        config_dir=config_dir,
        prompts=load_prompts(config_dir),
    )


def default_config(env: Mapping[str, str]) -> GaiConfig:
    """Build a GaiConfig from built-in defaults, ignoring config.toml and value overrides.

    Only the config directory (and so the prompt overrides) still follow the
    environment. Used by commands that must work with a broken config.
    """
    config_dir = resolve_config_dir(env)
    return GaiConfig(
        api_key=None,
        model=DEFAULT_MODEL,
        max_tokens=DEFAULT_MAX_TOKENS,
        temperature=DEFAULT_TEMPERATURE,
        top_p=DEFAULT_TOP_P,
        main_branch=DEFAULT_MAIN_BRANCH,
        remote=DEFAULT_REMOTE,
        editor=DEFAULT_EDITOR,
        verbose=False,
        config_dir=config_dir,
        prompts=load_prompts(config_dir),
    )


def _raw_value(
    env: Mapping[str, str], env_key: str, file_values: dict[str, Any], file_key: str
) -> object | None:
    value = env.get(env_key)
    if value is not None and value.strip():
        return value.strip()
    return file_values.get(file_key)


def _pick_str(
    env: Mapping[str, str],
    env_key: str,
    file_values: dict[str, Any],
    file_key: str,
    default: str,
) -> str:
    value = _raw_value(env, env_key, file_values, file_key)
    if value is None:
        return default
    return str(value)


def _pick_int(
    env: Mapping[str, str],
    env_key: str,
    file_values: dict[str, Any],
    file_key: str,
    default: int,
) -> int:
    value = _raw_value(env, env_key, file_values, file_key)
    if value is None:
        return default
    try:
        parsed = int(str(value))
    except ValueError as e:
        raise ConfigError(f"{env_key} must be an integer, got {value!r}") from e
    if parsed <= 0:
        raise ConfigError(f"{env_key} must be positive, got {parsed}")
    return parsed


def _pick_float(
    env: Mapping[str, str],
    env_key: str,
    file_values: dict[str, Any],
    file_key: str,
    default: float,
) -> float:
    value = _raw_value(env, env_key, file_values, file_key)
    if value is None:
        return default
    try:
        return float(str(value))
    except ValueError as e:
        raise ConfigError(f"{env_key} must be a number, got {value!r}") from e


def _parse_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be true or false, got {value!r}")
