"""Uri helpers"""
from urllib import parse

__all__ = ["join"]


def join(base: str, *parts: str, quote: bool = False) -> str:
    """Append path parts to a base url, keeping any path the base already has."""
    if not parts:
        return base

    path = "/".join(
        (parse.quote(part.strip("/"), safe="/") if quote else part.strip("/"))
        for part in parts
    )
    return f"{base.rstrip('/')}/{path}"
