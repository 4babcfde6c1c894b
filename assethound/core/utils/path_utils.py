"""Path utility functions for AssetHound."""

from pathlib import Path


def display_path(input_path: str | Path, base_dir: Path | None = None) -> str:
    """Render a path relative to ``base_dir`` with forward slashes.

    Used for log lines, so it never raises: paths outside ``base_dir`` (or
    calls without a base) fall back to the path as given.

    Args:
        input_path: Path to render (absolute or relative)
        base_dir: Directory the rendered path should be relative to

    Returns:
        POSIX-style path string
    """
    path_obj = Path(input_path)

    if base_dir is None or not path_obj.is_absolute():
        return path_obj.as_posix()

    try:
        return path_obj.relative_to(base_dir).as_posix()
    except ValueError:
        pass

    # Retry with the canonical base (handles /var -> /private/var on macOS)
    try:
        return path_obj.resolve().relative_to(base_dir.resolve()).as_posix()
    except (OSError, ValueError):
        return path_obj.as_posix()

