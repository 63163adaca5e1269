"""Configuration management for fenceval.

This module handles loading user configuration from ~/.config/fenceval/init.py
and provides a sandboxed execution environment for user settings.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Any, Optional

from fenceval.execution.external import DEFAULT_RUBY_COMMAND


class FencevalConfig:
    """Configuration container for fenceval settings.

    This class stores configuration values that can be set by the user's init.py file.
    All settings have sensible defaults.
    """

    def __init__(self):
        # Runtime settings
        self.runtime: str = "python"  # python, ruby
        self.ruby_command: list[str] = list(DEFAULT_RUBY_COMMAND)

        # Result formatting
        self.annotation_prefix: str = "# => "
        self.result_fence: str = "```"

        # Custom settings (user can add any additional settings)
        self._custom: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Set a custom configuration value."""
        self._custom[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a custom configuration value."""
        return self._custom.get(key, default)


def get_config_path() -> Path:
    """Get the path to the user's config directory."""
    config_home = os.environ.get('XDG_CONFIG_HOME')
    if config_home:
        return Path(config_home) / 'fenceval'
    return Path.home() / '.config' / 'fenceval'


def get_init_script_path() -> Path:
    """Get the path to the user's init.py script."""
    return get_config_path() / 'init.py'


def load_config() -> tuple[FencevalConfig, Optional[str]]:
    """Load configuration from ~/.config/fenceval/init.py.

    The init.py file is executed in a sandboxed environment where it can set
    configuration values on a 'config' object.

    Returns:
        A tuple of (config, error_message). If loading fails, error_message
        will contain details about the failure.
    """
    config = FencevalConfig()
    init_path = get_init_script_path()

    if not init_path.exists():
        return config, None

    sandbox = {
        '__builtins__': {
            'True': True,
            'False': False,
            'None': None,
            'str': str,
            'int': int,
            'float': float,
            'bool': bool,
            'list': list,
            'dict': dict,
            'tuple': tuple,
            'len': len,
            'print': print,
            # Explicitly deny dangerous operations
            '__import__': None,
            'open': None,
            'exec': None,
            'eval': None,
            'compile': None,
        },
        'config': config,
    }

    try:
        code = init_path.read_text()
        exec(code, sandbox)
        return config, None

    except Exception:
        error_msg = f"Error loading config from {init_path}:\n{traceback.format_exc()}"
        return config, error_msg
