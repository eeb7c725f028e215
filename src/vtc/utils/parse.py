"""
Parse Helpers
=============

Regex helpers shared by the timecode and runtime string parsers.

Time strings like ``HH:MM:SS:FF`` may be truncated at the head (``"12:05"``),
so each parser's regex captures optional ``section_N`` groups and the caller
pops the present ones off right-to-left.
"""

import re
from typing import Dict, List, Tuple

from vtc.errors import UnrecognizedFormatError


def apply_regex(pattern: re.Pattern, value: str) -> Dict[str, str]:
    """
    Match ``value`` against ``pattern`` and return its named groups.

    Unmatched optional groups are returned as empty strings.

    Raises:
        UnrecognizedFormatError: If ``value`` does not match.
    """
    match = pattern.match(value)
    if match is None:
        raise UnrecognizedFormatError(f"{value!r} is not a recognized format")
    return match.groupdict(default="")


def extract_time_sections(groups: Dict[str, str], section_count: int) -> List[str]:
    """Collect the present ``section_1`` .. ``section_N`` groups, left to right."""
    sections = []
    for index in range(1, section_count + 1):
        if section := groups.get(f"section_{index}", ""):
            sections.append(section)
    return sections


def pop_time_section(sections: List[str]) -> Tuple[int, List[str]]:
    """Pop the rightmost section as an int, or 0 when none remain."""
    if not sections:
        return 0, []
    *remaining, value = sections
    return int(value), remaining
