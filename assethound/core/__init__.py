"""Core building blocks for AssetHound: config, exceptions and utilities."""
