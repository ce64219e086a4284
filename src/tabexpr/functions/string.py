"""String bindings over Arrow's ``utf8_*`` and substring kernels."""

from __future__ import annotations

from typing import Any

import pyarrow.compute as pc


def register_bindings_string(session: Any) -> None:
    """Register string bindings on *session*'s scalar registry."""
    build = session.build_expr

    session.register("toupper", lambda x: build("utf8_upper", x))
    session.register("tolower", lambda x: build("utf8_lower", x))
    session.register("nchar", lambda x: build("utf8_length", x))
    session.register("str_trim", lambda string: build("utf8_trim_whitespace", string))

    def _starts_with(x: Any, prefix: str) -> Any:
        return build("starts_with", x, options=pc.MatchSubstringOptions(prefix))

    def _ends_with(x: Any, suffix: str) -> Any:
        return build("ends_with", x, options=pc.MatchSubstringOptions(suffix))

    def _str_detect(string: Any, pattern: str, negate: bool = False) -> Any:
        out = build("match_substring_regex", string, options=pc.MatchSubstringOptions(pattern))
        if negate:
            out = build("invert", out)
        return out

    def _paste0(*args: Any) -> Any:
        # Separator goes last for the join kernel.
        return build("binary_join_element_wise", *args, "")

    session.register("startsWith", _starts_with)
    session.register("endsWith", _ends_with)
    session.register("str_detect", _str_detect)
    session.register("paste0", _paste0)
