# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for mnexif

Rendering a MakerNote value never raises: unknown tags, type or count
mismatches and truncated composite payloads all degrade to fallback text.
The exceptions below only signal programming errors (bad arguments,
malformed static tables).

Copyright 2025 DNAi inc.
"""


class MnExifError(Exception):
    """
    Base exception for all mnexif errors.

    All mnexif exceptions inherit from this class, allowing
    catch-all error handling for any mnexif-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class RegistryError(MnExifError):
    """
    Raised when a tag table cannot be turned into a registry.

    This exception is raised when:
    - Two descriptors in one group share a tag ID
    - A regular descriptor uses the reserved unknown-tag ID (0xFFFF)
    - A descriptor or sentinel belongs to a different group
    - An enumerated lookup table repeats a raw value
    """
    pass


class UnknownGroupError(MnExifError):
    """
    Raised when a group argument is not one of the known tag groups.
    """
    pass


class InvalidValueError(MnExifError):
    """
    Raised when a Value cannot be constructed.

    This exception is raised when:
    - The type code is not a supported TIFF/EXIF type
    - A rational element is not a (numerator, denominator) pair
    - An ASCII value is not given as text
    """
    pass
