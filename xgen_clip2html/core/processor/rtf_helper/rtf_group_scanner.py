# xgen_clip2html/core/processor/rtf_helper/rtf_group_scanner.py
"""
RTF Group Scanner

Functions for finding and removing balanced {\\name ...} groups in RTF.

This is a primitive RTF parser: it finds the opening of a named
group and then walks forward keeping a depth counter until the matching
closing brace. Escaped braces (\\{ and \\}) never change the depth.
"""
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Pattern

logger = logging.getLogger("xgen_clip2html.rtf.scanner")


@dataclass
class RTFGroup:
    """RTF group location information."""
    start: int
    end: int  # exclusive
    content: str


@lru_cache(maxsize=64)
def _compile_group_start(group_name: str) -> Pattern[str]:
    return re.compile(r'\{\\' + group_name)


def _get_non_whitespace_char(content: str, start_index: int, direction: int) -> Optional[str]:
    index = start_index + direction
    n = len(content)

    while 0 <= index < n and content[index].isspace():
        index += direction

    if 0 <= index < n:
        return content[index]
    return None


def get_previous_non_whitespace_char(content: str, index: int) -> Optional[str]:
    """Return the first non-whitespace character before index, or None."""
    return _get_non_whitespace_char(content, index, -1)


def get_next_non_whitespace_char(content: str, index: int) -> Optional[str]:
    """Return the first non-whitespace character after index, or None."""
    return _get_non_whitespace_char(content, index, 1)


def find_group(content: str, group_name: str, start: int = 0) -> Optional[RTFGroup]:
    """
    Find the first group with the given name.

    Groups are recognized by the {\\<name> format. The name is a regex
    fragment, so alternations like '(?:header|footer)' and lookaheads like
    '(?!pict)' are allowed.

    Args:
        content: RTF content
        group_name: Group name pattern
        start: Offset where the search begins

    Returns:
        RTFGroup or None if no group starts at or after `start`
    """
    match = _compile_group_start(group_name).search(content, start)
    if not match:
        return None

    n = len(content)
    depth = 0
    i = match.start()

    while True:
        ch = content[i]

        if ch == '{':
            # Every group start has format {\ (whitespace allowed in between),
            # literal braces in content are escaped.
            if (get_previous_non_whitespace_char(content, i) != '\\'
                    and get_next_non_whitespace_char(content, i) == '\\'):
                depth += 1
        elif ch == '}':
            if get_previous_non_whitespace_char(content, i) != '\\' and depth > 0:
                depth -= 1

        i += 1
        if i >= n or depth <= 0:
            break

    return RTFGroup(
        start=match.start(),
        end=i,
        content=content[match.start():i],
    )


def get_groups(content: str, group_name: str) -> List[RTFGroup]:
    """
    Get all groups with the given name, left to right.

    Args:
        content: RTF content
        group_name: Group name pattern

    Returns:
        List of non-overlapping RTFGroup objects
    """
    groups = []
    position = 0

    while True:
        group = find_group(content, group_name, position)
        if group is None:
            break
        groups.append(group)
        position = group.end

    logger.debug(f"Found {len(groups)} '{group_name}' groups")
    return groups


def remove_groups(content: str, group_name: str) -> str:
    """
    Remove all groups with the given name.

    Offsets shift after every removal, so the search restarts from the
    beginning each time.

    Args:
        content: RTF content
        group_name: Group name pattern

    Returns:
        RTF content without the removed groups
    """
    while True:
        group = find_group(content, group_name)
        if group is None:
            return content
        content = content[:group.start] + content[group.end:]


__all__ = [
    'RTFGroup',
    'find_group',
    'get_groups',
    'remove_groups',
    'get_previous_non_whitespace_char',
    'get_next_non_whitespace_char',
]
