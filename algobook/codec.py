"""Pack a list of strings into one string and back."""

from __future__ import annotations

from collections.abc import Iterable


def encode(strs: Iterable[str]) -> str:
    """Prefix each string with its length and ``#`` and join them."""
    return "".join(f"{len(s)}#{s}" for s in strs)


def decode(data: str) -> list[str]:
    """Split a string made by :func:`encode` back into its parts."""
    result = []
    i = 0
    while i < len(data):
        sep = data.find("#", i)
        if sep < 0:
            raise ValueError(f"missing length separator at position {i}")
        length_text = data[i:sep]
        if not length_text.isdigit():
            raise ValueError(f"bad length {length_text!r} at position {i}")
        start = sep + 1
        end = start + int(length_text)
        if end > len(data):
            raise ValueError(f"string at position {start} runs past the end")
        result.append(data[start:end])
        i = end
    return result