"""AssetHound - content-addressed asset renaming for static build output."""

__version__ = "0.1.0"
