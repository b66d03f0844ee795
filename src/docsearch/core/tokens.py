# src/docsearch/core/tokens.py
"""
Search token normalization.

The documentation generator keys its search data by a lowercased id in
which every byte outside [a-z0-9] (UTF-8) is written as "_" plus its two
hex digits:

    onIdle     -> onidle
    operator=  -> operator_3d
    my_func    -> my_5ffunc
"""

import re

_SAFE = re.compile(r"[a-z0-9]")
_ESCAPES = re.compile(r"(?:_[0-9a-f]{2})+")


def encode_token(name: str) -> str:
    """Normalize a raw identifier into a search token."""
    out = []
    for ch in name.lower():
        if _SAFE.fullmatch(ch):
            out.append(ch)
        else:
            out.extend(f"_{b:02x}" for b in ch.encode("utf-8"))
    return "".join(out)


def decode_token(token: str) -> str:
    """Undo the "_xx" escapes of a token. Case is not recoverable."""
    def _unescape(match: re.Match) -> str:
        raw = bytes.fromhex(match.group().replace("_", ""))
        return raw.decode("utf-8", errors="replace")

    return _ESCAPES.sub(_unescape, token)
