# xgen_clip2html/core/functions/paste_report.py
"""
Paste Report

Conditions found while re-embedding pasted images. They are reported
(logged and collected), never raised: every failure degrades to
"leave this one thing unchanged".

This module defines:
- PasteIssueType: Enum of reportable conditions
- PasteIssue: A single reported condition with diagnostic details
- ImageRewriteResult: Result container of one paste operation
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from xgen_clip2html.core.processor.rtf_helper.rtf_image_extractor import RTFImageData

logger = logging.getLogger("xgen_clip2html.report")


class PasteIssueType(str, Enum):
    """Reportable conditions."""
    # Number of HTML <img> tags differs from the number of RTF images
    COUNT_MISMATCH = "count_mismatch"
    # Image for a file:// placeholder cannot be embedded
    UNSUPPORTED_IMAGE_TYPE = "unsupported_image_type"
    # Object URL payload has no known file signature
    UNRECOGNIZED_SIGNATURE = "unrecognized_signature"
    # RTF group without a name; extraction continued on best effort
    MALFORMED_GROUP_TEXT = "malformed_group_text"


@dataclass
class PasteIssue:
    """
    A reported condition.

    Attributes:
        issue_type: Condition kind
        message: Human-readable description
        details: Diagnostic values (counts, index, type, url)
    """
    issue_type: PasteIssueType
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.issue_type.value,
            "message": self.message,
            "details": dict(self.details),
        }


def report_issue(
    issues: Optional[List[PasteIssue]],
    issue_type: PasteIssueType,
    message: str,
    log: Optional[logging.Logger] = None,
    **details: Any,
) -> PasteIssue:
    """
    Log a condition and append it to `issues` (when a list is given).

    Args:
        issues: Collector list or None
        issue_type: Condition kind
        message: Description
        log: Logger to use (default: module logger)
        **details: Diagnostic values

    Returns:
        The created PasteIssue
    """
    issue = PasteIssue(issue_type=issue_type, message=message, details=details)
    (log or logger).warning(f"{issue_type.value}: {message} {details}")
    if issues is not None:
        issues.append(issue)
    return issue


@dataclass
class ImageRewriteResult:
    """
    Result of one paste operation.

    Attributes:
        html: Rewritten HTML (the input HTML when nothing was replaced)
        original_html: HTML as received
        images: Images extracted from RTF, in placeholder order
        data_urls: Data URL per image (None where not embeddable)
        issues: Reported conditions
    """
    html: str
    original_html: str = ""
    images: List["RTFImageData"] = field(default_factory=list)
    data_urls: List[Optional[str]] = field(default_factory=list)
    issues: List[PasteIssue] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether any image source was rewritten."""
        return self.html != self.original_html

    def has_issue(self, issue_type: PasteIssueType) -> bool:
        return any(issue.issue_type == issue_type for issue in self.issues)

    def __str__(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return (
            f"ImageRewriteResult(images={len(self.images)}, "
            f"changed={self.changed}, issues={len(self.issues)})"
        )


__all__ = [
    'PasteIssueType',
    'PasteIssue',
    'ImageRewriteResult',
    'report_issue',
]
