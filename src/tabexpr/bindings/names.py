"""Call-name resolution: ``"pkg::fn"`` -> ``("pkg", "fn")``."""

from __future__ import annotations

_SEP = "::"


def split_name(name: str) -> tuple[str, str]:
    """Split a possibly namespace-qualified name on the first ``::``.

    The namespace is informational only; nothing routes on it yet.

    Args:
        name: A name like ``"sd"`` or ``"stats::sd"``.

    Returns:
        ``(namespace, bare_name)``; namespace is ``""`` when unqualified.
    """
    namespace, sep, bare = name.partition(_SEP)
    if not sep:
        return "", name
    return namespace, bare


def bare_name(name: str) -> str:
    """Return *name* with any ``pkg::`` qualifier removed."""
    return split_name(name)[1]
