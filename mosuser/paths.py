"""Resolution of paths against the current working directory."""

from __future__ import annotations


def _join(base: str, rest: str) -> str:
    out = base if base.endswith("/") else base + "/"
    out += rest
    if out.endswith("/") and len(out) != 1:
        out = out[:-1]
    return out


def resolve_path(path: str, cwd: str) -> str:
    """Turn ``path`` into an absolute path, relative to ``cwd``.

    Names of programs ending in ``.b`` and absolute paths are kept as they
    are; ``..`` climbs one level and ``.`` stands for ``cwd`` itself.
    """
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    if len(path) > 2 and path.endswith(".b"):
        return path
    if path.startswith("/"):
        return path
    if path.startswith(".."):
        slash = cwd.rfind("/")
        base = "/" if slash <= 0 else cwd[:slash]
        return _join(base, path[3:].lstrip("./"))
    if path == "." or path.startswith("./"):
        return _join(cwd, path[2:])
    return _join(cwd, path)