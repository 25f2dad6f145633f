# xgen_clip2html/core/processor/rtf_helper/rtf_content_extractor.py
"""
RTF Content Extractor

Extracts the raw payload of a single RTF group (hex digits for \\pict groups).
"""
import logging
import re
from typing import List, Optional

from xgen_clip2html.core.functions.paste_report import (
    PasteIssue,
    PasteIssueType,
    report_issue,
)
from xgen_clip2html.core.processor.rtf_helper.rtf_group_scanner import (
    remove_groups,
)

logger = logging.getLogger("xgen_clip2html.rtf.content")

_GROUP_NAME_RE = re.compile(r'^\{\\(\w+)')
_LEADING_CONTROL_WORDS_RE = re.compile(r'^\{(\\[\w-]+\s*)+')
# Content sometimes follows the last subgroup without any space.
_SUBGROUP_WITHOUT_SPACE_RE = re.compile(r'\}([^{\s]+)')


def get_group_name(group: str) -> Optional[str]:
    """
    Get the control word naming the group.

    Args:
        group: Whole group string, e.g. '{\\pict ...}'

    Returns:
        Group name ('pict') or None if the group does not start with {\\word
    """
    match = _GROUP_NAME_RE.match(group)
    if not match:
        return None
    return match.group(1)


def extract_group_content(group: str, issues: Optional[List[PasteIssue]] = None) -> str:
    """
    Get group content.

    The content starts with the first character that is not a part of
    a control word or a subgroup:

        '{\\group{\\subgroup subgroupcontent} group content}' -> 'group content'

    Args:
        group: Whole group string
        issues: Optional collector for reported conditions

    Returns:
        Extracted group content
    """
    group_name = get_group_name(group)

    group = _SUBGROUP_WITHOUT_SPACE_RE.sub(r'} \1', group)

    if group_name is None:
        report_issue(
            issues,
            PasteIssueType.MALFORMED_GROUP_TEXT,
            "Group has no name, subgroups are not removed",
            log=logger,
            group=group[:40],
        )
    else:
        # Remove all subgroups that are not the actual group
        group = remove_groups(group, '(?!' + group_name + ')')

    # Whitespace may be left at the beginning after the last subgroup
    group = _LEADING_CONTROL_WORDS_RE.sub('', group, count=1).strip()

    # What's left is group content with } at the end
    if group.endswith('}'):
        group = group[:-1]

    return group


__all__ = [
    'get_group_name',
    'extract_group_content',
]
