"""Entry point for running AssetHound as a module: python -m assethound.

This enables:
    python -m assethound rename dist
    python -m assethound rename dist --assets-subdir assets --ext .js .css
"""

from assethound.api.cli.main import main

if __name__ == "__main__":
    main()
