"""Shared path constants for the per-user configuration file."""

from __future__ import annotations

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('intervue-coder')
DEFAULT_CONFIG_PATH = CONFIG_DIR / 'config.json'
