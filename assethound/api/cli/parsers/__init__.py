"""Argument parser utilities for AssetHound CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .rename_parser import add_rename_subparser

__all__ = [
    "add_rename_subparser",
    "create_main_parser",
    "setup_subparsers",
]
