"""External interfaces for AssetHound."""
