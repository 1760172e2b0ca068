"""Request path to file path routing.

``resolve_path`` is pure: it never touches the filesystem, so a traversal
attempt is rejected before anything is stat'ed or read.  Symlink escapes are
checked later by the server, once the lexical path is known to be safe.
"""

import os
import posixpath
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from latitude.errors import PathUnsafe


def build_aliases(
    index_document: str,
    admin_document: str,
    favicon_asset: str,
) -> Mapping[str, str]:
    """Return the immutable reserved-path table."""
    return MappingProxyType(
        {
            "/": index_document,
            "/admin": admin_document,
            "/favicon.ico": favicon_asset,
        }
    )


def is_within(path: Path, root: Path) -> bool:
    """Whether *path* is *root* or lies beneath it, compared by components."""
    return path.is_relative_to(root)


def resolve_path(path: str, root: Path, aliases: Mapping[str, str]) -> Path:
    """Map a decoded request path to an absolute file path under *root*.

    *root* must already be absolute and normalized.  Aliases are matched
    exactly and bypass general resolution.

    Raises:
        PathUnsafe: The path contains a NUL byte, cannot be encoded as a
            file name, or normalizes to a location outside *root*.
    """
    target = aliases.get(path)
    if target is not None:
        return root / target

    if "\x00" in path:
        raise PathUnsafe("NUL byte in path")
    try:
        os.fsencode(path)
    except UnicodeEncodeError:
        raise PathUnsafe(f"{path!r} is not a valid file name") from None

    # Strip before normalizing so "/../x" stays a traversal instead of
    # collapsing against the URL root.
    relative = posixpath.normpath(path.lstrip("/"))
    candidate = Path(os.path.normpath(root / relative))

    if not is_within(candidate, root):
        raise PathUnsafe(f"{path!r} escapes the public root")
    return candidate
