"""Utility helpers for Triominos."""

from .logging_config import setup_logging, setup_logging_from_env, get_game_logger

__all__ = ["setup_logging", "setup_logging_from_env", "get_game_logger"]
