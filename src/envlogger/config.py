"""Spec source resolution for envlogger.

Three-layer resolution (highest priority wins):
  1. Explicit argument — a spec passed in code or on the command line
  2. Environment variable — ENVLOG by default
  3. Project config — the "spec" key of the nearest .envlog.json

The filter strategy resolves the same way from ENVLOG_STRATEGY and the
"strategy" key, falling back to 'regex'.
"""

import json
import os
from pathlib import Path

from .diagnostics import CONFIG, get_diagnostics
from .filters import DEFAULT_STRATEGY


DEFAULT_ENV_VAR = "ENVLOG"
STRATEGY_ENV_VAR = "ENVLOG_STRATEGY"
PROJECT_CONFIG_NAME = ".envlog.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .envlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object file, returning empty dict on error.

    A missing file is silent; an unreadable or undecodable one is
    reported on the 'config' channel.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        get_diagnostics().warn("ignoring config file {path}: {err}",
                               channel='config', path=path, err=e)
        return {}
    return data if isinstance(data, dict) else {}


def load_project_config(start_dir=None):
    """Load the nearest .envlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
def resolve_spec(explicit=None, env_var=DEFAULT_ENV_VAR, start_dir=None):
    """Resolve the logging spec string.

    Returns the spec string, or None when no layer provides one.
    """
    diag = get_diagnostics()

    if explicit is not None:
        diag.emit(CONFIG, "spec from argument: {spec!r}",
                  channel='config', spec=explicit)
        return explicit

    env_val = os.environ.get(env_var) if env_var else None
    if env_val is not None:
        diag.emit(CONFIG, "spec from ${var}: {spec!r}",
                  channel='config', var=env_var, spec=env_val)
        return env_val

    project_cfg, path = load_project_config(start_dir)
    file_val = project_cfg.get("spec")
    if isinstance(file_val, str):
        diag.emit(CONFIG, "spec from {path}: {spec!r}",
                  channel='config', path=path, spec=file_val)
        return file_val

    diag.emit(CONFIG, "no spec configured, defaulting to errors only",
              channel='config')
    return None


def resolve_strategy(explicit=None, env_var=STRATEGY_ENV_VAR, start_dir=None):
    """Resolve the content filter strategy name ('regex' or 'substring')."""
    if explicit:
        return explicit

    env_val = os.environ.get(env_var) if env_var else None
    if env_val:
        return env_val.strip().lower()

    project_cfg, _ = load_project_config(start_dir)
    file_val = project_cfg.get("strategy")
    if isinstance(file_val, str) and file_val:
        return file_val.strip().lower()

    return DEFAULT_STRATEGY
