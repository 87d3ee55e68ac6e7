"""Splitting strings on sets of delimiter characters."""


def tokenise(text: str, delimiters: str) -> list[str]:
    """Split ``text`` at every character found in ``delimiters``.

    Adjacent delimiters yield empty tokens; an empty text yields no tokens.
    """
    if not text:
        return []
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return tokens