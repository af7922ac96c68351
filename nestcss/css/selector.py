from __future__ import annotations

__all__ = ["compose_selector", "PARENT"]

PARENT = "&"


def compose_selector(selector: str, parent: str | None = None) -> str:
    """Join a nested selector fragment onto its parent selector.

    A fragment containing `&` has its first `&` replaced by the parent with no
    added whitespace, so `&:hover` under `a` becomes `a:hover`. Any other `&`
    is left as is: `& + &` becomes `a + &`. Fragments without `&` are joined
    as descendants, `b` under `a` becomes `a b`.

    Args
        selector (str): The nested fragment.
        parent (str | None): The composed selector of the enclosing block.
    """
    p = "" if parent is None else parent.strip()
    s = selector.strip()
    if PARENT in s:
        return s.replace(PARENT, p, 1)
    return f"{p} {s}"
