def split_lines(text: str) -> list[str]:
    """Split a multi-line input into trimmed, non-empty lines, keeping order."""
    return [line.strip() for line in text.splitlines() if line.strip()]
