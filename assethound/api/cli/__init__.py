"""Command-line interface for AssetHound."""
