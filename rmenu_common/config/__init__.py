"""Configuration helpers for rmenu_common."""

from .env import parse_args_env, parse_bool_env, parse_path_env

__all__ = [
    "parse_args_env",
    "parse_bool_env",
    "parse_path_env",
]
