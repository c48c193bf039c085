"""Link resolution for Mainly Norfolk pages.

The site links between pages with a mix of absolute paths, sibling file names
and ``../`` hops. Every path handed back to an agent must be usable on its own,
so links are resolved against the path of the page they were found on.
"""

from __future__ import annotations

from folkcontext.config import SITE_ORIGIN

_PARENT = "../"
_CURRENT = "./"


def is_full_url(href: str) -> bool:
    return href.startswith(("http://", "https://"))


def _directory_segments(referrer_path: str) -> list[str]:
    """Segments of the directory containing ``referrer_path``.

    ``"/a/b/"`` is already a directory; ``"/a/b/c.html"`` lives in ``/a/b/``.
    """
    segments = [s for s in referrer_path.split("/") if s]
    if segments and not referrer_path.endswith("/"):
        segments.pop()
    return segments


def resolve_path(href: str, referrer_path: str) -> str:
    """Resolve a link found on ``referrer_path`` to a site-absolute path.

    Full URLs and paths starting with ``/`` are returned unchanged, so the
    function is idempotent on its own output. Each leading ``../`` moves one
    directory up; hops past the site root stay at the root.
    """
    if is_full_url(href) or href.startswith("/"):
        return href

    directory = _directory_segments(referrer_path)
    remainder = href

    while True:
        if remainder.startswith(_PARENT):
            remainder = remainder[len(_PARENT) :]
            if directory:
                directory.pop()
        elif remainder.startswith(_CURRENT):
            remainder = remainder[len(_CURRENT) :]
        else:
            break

    base = "/" + "".join(f"{segment}/" for segment in directory)
    return base + remainder


def to_url(path: str) -> str:
    """Prefix the site origin unless ``path`` is already a full URL."""
    if is_full_url(path):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return SITE_ORIGIN + path
