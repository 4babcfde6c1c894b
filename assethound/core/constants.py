"""Core constants for AssetHound."""

# Build output defaults
DEFAULT_DIST_DIR = "dist"
DEFAULT_ASSETS_SUBDIR = "x"
DEFAULT_EXTENSIONS = (".js", ".css", ".woff2", ".woff")

# Convergence: the initial run plus 9 retries
DEFAULT_MAX_ITERATIONS = 10

# Content digest width in bytes (rendered as twice as many hex characters)
DIGEST_SIZE_BYTES = 8

# Binary detection sample window
BINARY_SNIFF_BYTES = 8192
BINARY_CONTROL_RATIO = 0.30

# Config file discovered in the current directory
DEFAULT_CONFIG_FILENAME = ".assethound.json"
