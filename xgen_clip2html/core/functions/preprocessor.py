# xgen_clip2html/core/functions/preprocessor.py
"""
BasePreprocessor - Abstract base class for clipboard payload preprocessing

Defines the interface for preparing a raw clipboard payload (str or bytes)
before image extraction.

The preprocessor's job is to:
1. Decode byte payloads
2. Remove regions that must not take part in extraction
3. Return preprocessed data ready for further processing

Processing Pipeline Position:
    1. Host supplies raw HTML / RTF payloads
    2. Preprocessor.preprocess() -> PreprocessedData (THIS STEP)
    3. Image extraction and placement
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PreprocessedData:
    """
    Result of preprocessing operation.

    Attributes:
        raw_content: Original payload (for reference)
        clean_content: Processed text ready for use - THIS IS THE TRUE SOURCE
        encoding: Detected or default encoding of a byte payload
        metadata: Anything discovered during preprocessing
    """
    raw_content: Any = None
    clean_content: str = ""
    encoding: str = "utf-8"
    metadata: Dict[str, Any] = field(default_factory=dict)


class BasePreprocessor(ABC):
    """
    Abstract base class for payload preprocessors.

    Subclasses must implement:
    - preprocess(): Process the payload and return PreprocessedData
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def preprocess(self, payload: Any, **kwargs) -> PreprocessedData:
        """
        Preprocess a clipboard payload.

        Args:
            payload: str or bytes
            **kwargs: Additional format-specific options

        Returns:
            PreprocessedData containing the cleaned text
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name."""
        pass

    def validate(self, data: Any) -> bool:
        """
        Validate if the payload can be preprocessed by this preprocessor.

        Default implementation returns True.
        """
        _ = data
        return True


__all__ = [
    'BasePreprocessor',
    'PreprocessedData',
]
