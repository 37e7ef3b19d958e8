from __future__ import annotations


def normalize_extension(ext: str) -> str:
    if not ext:
        return ""
    if not ext.startswith("."):
        ext = "." + ext
    return ext.lower()


def matches_extension(path: str, ext: str) -> bool:
    """
    Case-insensitive suffix match. An empty filter accepts everything.
    ".go" also accepts "foo.mango": this is a suffix test, not an extension parse.
    """
    if not ext:
        return True
    return path.lower().endswith(normalize_extension(ext))
