import os
import posixpath
from pathlib import Path


def ensure_posix_separator(file_path: str, sep: str = os.sep) -> str:
    if sep == posixpath.sep:
        return file_path
    return file_path.replace(sep, posixpath.sep)


def resolve_import_target(import_target: str, file_context: str) -> str:
    """Join relative import targets onto the importing file's path.

    Lexical only: ``src/a.ts`` + ``./b`` gives ``src/a.ts/b``. Nothing is
    looked up on disk and no extensions are tried.
    """
    if not import_target.startswith("."):
        return import_target
    resolved = posixpath.normpath(posixpath.join(file_context, import_target))
    if import_target.endswith(posixpath.sep) and not resolved.endswith(posixpath.sep):
        resolved += posixpath.sep
    return resolved


def relative_to_root(file_path: str, root: Path | None) -> str:
    normalized = ensure_posix_separator(file_path)
    if root is None:
        return normalized
    root_text = ensure_posix_separator(str(root)).rstrip(posixpath.sep)
    prefix = f"{root_text}{posixpath.sep}"
    if normalized.startswith(prefix):
        return normalized[len(prefix) :]
    return normalized
