"""Shared utilities for the Sales Intel Hub."""

from utils.config import AppConfig

__all__ = ["AppConfig"]
