import os
from pathlib import Path

from .errors import PathResolveError

HOME_MARKER = "~/"
PART_FILE_EXT = "ts"


def resolve_path(path: str) -> str:
    if not path.startswith(HOME_MARKER):
        return path
    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as ex:
        raise PathResolveError(f"Failed to resolve the home directory: {path}") from ex
    return path.replace("~", home, 1)


def resolve_output_prefix(prefix: str, out_dir_path: str | None = None) -> str:
    resolved = resolve_path(prefix)
    if out_dir_path is None or os.path.isabs(resolved):
        return resolved
    return os.path.join(resolve_path(out_dir_path), resolved)


def part_file_path(prefix: str, num: int) -> str:
    return f"{prefix}_part{num}.{PART_FILE_EXT}"


def dirpath(file_path: str) -> str:
    return os.path.dirname(file_path)


