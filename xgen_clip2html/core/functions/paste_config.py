# xgen_clip2html/core/functions/paste_config.py
"""
Paste Processor Configuration

Configuration dataclass shared by PasteImageProcessor and its handlers.
Accepts a plain dict as well, unknown keys are ignored.
"""
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from xgen_clip2html.core.functions.img_processor import (
    ImageFormat,
    SUPPORTED_IMAGE_TYPES,
)

logger = logging.getLogger("xgen_clip2html.config")


@dataclass
class PasteProcessorConfig:
    """
    PasteImageProcessor Configuration.

    Attributes:
        supported_image_types: Formats embedded as Data URLs
        replaceable_src_prefixes: <img> sources replaced by RTF images
        default_rtf_encoding: Encoding of RTF bytes without \\ansicpg
        html_parser: BeautifulSoup parser for the blob fallback
        fetch_timeout: Object URL fetch timeout in seconds (HTTP resolver)
    """
    supported_image_types: FrozenSet[ImageFormat] = field(
        default_factory=lambda: frozenset(SUPPORTED_IMAGE_TYPES)
    )
    replaceable_src_prefixes: Tuple[str, ...] = ("file://",)
    default_rtf_encoding: str = "cp1252"
    html_parser: str = "html.parser"
    fetch_timeout: float = 10.0

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]]) -> "PasteProcessorConfig":
        """
        Build a config from a dict.

        Image types may be given as ImageFormat members or names ('png').
        """
        values = dict(values or {})
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in values.items():
            if key not in known:
                logger.debug(f"Ignoring unknown config key: {key}")
                continue
            if value is None:
                continue
            if key == "supported_image_types":
                value = frozenset(
                    v if isinstance(v, ImageFormat) else ImageFormat(str(v).lower())
                    for v in value
                )
            elif key == "replaceable_src_prefixes":
                value = (value,) if isinstance(value, str) else tuple(value)
            kwargs[key] = value

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "supported_image_types": sorted(t.value for t in self.supported_image_types),
            "replaceable_src_prefixes": list(self.replaceable_src_prefixes),
            "default_rtf_encoding": self.default_rtf_encoding,
            "html_parser": self.html_parser,
            "fetch_timeout": self.fetch_timeout,
        }


def resolve_config(
    config: Union[PasteProcessorConfig, Mapping[str, Any], None] = None,
    **overrides: Any
) -> PasteProcessorConfig:
    """
    Normalize a config argument.

    Args:
        config: PasteProcessorConfig, dict or None (defaults)
        **overrides: Keyword overrides (None values are ignored)

    Returns:
        PasteProcessorConfig
    """
    if isinstance(config, PasteProcessorConfig):
        base = config.to_dict()
    else:
        base = dict(config or {})

    base.update({k: v for k, v in overrides.items() if v is not None})
    return PasteProcessorConfig.from_dict(base)


__all__ = [
    'PasteProcessorConfig',
    'resolve_config',
]
