#!/usr/bin/env python3
"""
Permissive argument parsing

Benchmark arguments are converted by taking the leading decimal prefix of
the string and ignoring whatever follows it. A string with no such prefix,
or a missing argument, counts as 0. Nothing here ever raises.

    "  42"    -> 42
    "-7"      -> -7
    "12abc"   -> 12
    "1_000"   -> 1000   (single underscores between digits)
    "1__2"    -> 1
    "0d12"    -> 12     (optional 0d decimal marker after the sign)
    "abc"     -> 0
"""

import re
from typing import Optional

# Optional sign, optional 0d marker, then digits with single underscores between them
_PREFIX = re.compile(r'\s*([+-]?)(?:0[dD](?=\d))?(\d+(?:_\d+)*)', re.ASCII)


def to_int(text: Optional[str]) -> int:
    """Parse the leading integer of text, 0 if there is none"""
    if text is None:
        return 0

    match = _PREFIX.match(text)
    if not match:
        return 0

    sign, digits = match.groups()
    return int(sign + digits.replace('_', ''))
