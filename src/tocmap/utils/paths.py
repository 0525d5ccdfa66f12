"""Site path helpers.

Site paths are forward-slash separated and site-relative. Nothing here touches
the file system.
"""

from __future__ import annotations

from typing import List, Tuple


def _segments(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


def _directory(path: str) -> str:
    head, _, _ = path.rpartition("/")
    return head


def normalize_file(path: str) -> str:
    """Normalize a relative file path.

    Backslashes become slashes, ``.`` segments are dropped and ``name/..``
    pairs collapse. Leading ``..`` segments are kept.
    """
    parts: List[str] = []
    for part in path.replace("\\", "/").split("/"):
        if not part or part == ".":
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
        else:
            parts.append(part)
    return "/".join(parts)


def get_relative_path_to_file(relative_to: str, path: str) -> str:
    """Return the path of ``path`` as seen from the directory of ``relative_to``.

    >>> get_relative_path_to_file("a/b/doc.md", "a/TOC.md")
    '../TOC.md'
    """
    from_dir = _segments(_directory(relative_to))
    to_dir = _segments(_directory(path))
    file_name = path.rpartition("/")[2]

    common = 0
    for source, target in zip(from_dir, to_dir):
        if source != target:
            break
        common += 1

    parts = [".."] * (len(from_dir) - common) + to_dir[common:] + [file_name]
    return "/".join(parts)


def relative_directory_info(file_path: str, toc_path: str) -> Tuple[int, int]:
    """Count the folders to descend into and ascend out of to reach a TOC.

    Returns ``(sub_directory_count, parent_directory_count)`` for the walk
    from the directory of ``file_path`` to the directory of ``toc_path``.
    """
    relative_dir = _directory(normalize_file(get_relative_path_to_file(file_path, toc_path)))
    if not relative_dir:
        return 0, 0

    parts = [part for part in relative_dir.split("/") if part.strip()]
    parent_directory_count = sum(1 for part in parts if part == "..")
    return len(parts) - parent_directory_count, parent_directory_count
