# xgen_clip2html/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for paste image handlers

Defines the base interface for handlers that rewrite <img> sources of a
pasted HTML payload. Manages config and preprocessor instances passed from
PasteImageProcessor at instance level for reuse by internal methods.

Each handler should override:
- _create_preprocessor(): Provide payload-specific preprocessor

Handlers:
    - RTFImageHandler: Replace file:// placeholders with RTF pictures
    - BlobImageHandler: Replace blob: sources with fetched content (async)
"""
import logging
from abc import ABC
from typing import Any, Mapping, Optional, Union

from xgen_clip2html.core.functions.paste_config import (
    PasteProcessorConfig,
    resolve_config,
)
from xgen_clip2html.core.functions.preprocessor import (
    BasePreprocessor,
    PreprocessedData,
)
from xgen_clip2html.core.processor.html_helper import HTMLPreprocessor

logger = logging.getLogger("xgen_clip2html.processor")


class BaseHandler(ABC):
    """
    Abstract base class for paste image handlers.

    The preprocessor is lazy-initialized on first access.

    Attributes:
        config: PasteProcessorConfig passed from PasteImageProcessor
        preprocessor: Payload-specific preprocessor instance
        logger: Logging instance
    """

    def __init__(
        self,
        config: Union[PasteProcessorConfig, Mapping[str, Any], None] = None,
    ):
        """
        Initialize BaseHandler.

        Args:
            config: PasteProcessorConfig or dict (passed from PasteImageProcessor)
        """
        self._config = resolve_config(config)
        self._preprocessor: Optional[BasePreprocessor] = None
        self._logger = logging.getLogger(f"xgen_clip2html.processor.{self.__class__.__name__}")

    def _create_preprocessor(self) -> BasePreprocessor:
        """
        Create payload-specific preprocessor.

        Override this method in subclasses to provide the appropriate
        preprocessor. Defaults to the HTML preprocessor.

        Returns:
            BasePreprocessor subclass instance
        """
        return HTMLPreprocessor()

    @property
    def config(self) -> PasteProcessorConfig:
        """Configuration."""
        return self._config

    @property
    def preprocessor(self) -> BasePreprocessor:
        """Payload-specific preprocessor (lazy-initialized)."""
        if self._preprocessor is None:
            self._preprocessor = self._create_preprocessor()
        return self._preprocessor

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    def preprocess(self, payload: Any, **kwargs) -> PreprocessedData:
        """
        Preprocess a payload using the handler's preprocessor.

        Args:
            payload: Raw payload (str or bytes)
            **kwargs: Preprocessor options

        Returns:
            PreprocessedData
        """
        return self.preprocessor.preprocess(payload, **kwargs)


__all__ = ['BaseHandler']
