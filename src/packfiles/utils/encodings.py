"""
Encoding handling utilities.

Matched files are always treated as text, so decoding walks a fallback chain
whose last entry accepts any byte sequence.
"""

import logging
from typing import List, Optional, Tuple


# Encodings to try, ordered by likelihood; latin-1 never fails
DEFAULT_ENCODINGS = [
    'utf-8',
    'cp1252',     # Windows-1252
    'latin-1',
]

# Set up module logger
logger = logging.getLogger(__name__)


class EncodingDetector:
    """Handles text decoding with fallbacks."""

    def __init__(self, fallback_encodings: Optional[List[str]] = None):
        """
        Initialize the encoding detector.

        Args:
            fallback_encodings: List of encodings to try. If None, uses defaults.
        """
        self.encodings = fallback_encodings or DEFAULT_ENCODINGS
        if 'latin-1' not in self.encodings:
            self.encodings = list(self.encodings) + ['latin-1']

    def decode_bytes(self, content: bytes, file_path: Optional[str] = None) -> Tuple[str, str]:
        """
        Decode bytes to text using the first encoding that succeeds.

        Args:
            content: Raw bytes to decode.
            file_path: Optional file path for log messages.

        Returns:
            Tuple of (decoded_text, encoding_used).
        """
        for encoding in self.encodings:
            try:
                decoded = content.decode(encoding)
            except UnicodeDecodeError:
                continue
            if encoding != self.encodings[0]:
                logger.info(f"Decoded {file_path} using fallback encoding {encoding}")
            return decoded, encoding

        # Unreachable while latin-1 is in the chain
        return content.decode('latin-1'), 'latin-1'
