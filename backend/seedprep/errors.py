"""
Failure kinds raised by the payload and generation services
Messages never include secret content
"""


class SeedprepError(ValueError):
    """Base class for all seedprep failures"""


class PayloadError(SeedprepError):
    """A payload could not be encoded or decoded"""


class FieldTooLarge(PayloadError):
    """A content field does not fit its one-byte length prefix"""

    def __init__(self, field_name: str, size: int, limit: int = 255):
        self.field_name = field_name
        self.size = size
        self.limit = limit
        super().__init__(f"{field_name} is {size} bytes, maximum is {limit}")


class MalformedPayload(PayloadError):
    """Encoded bytes do not match the field layout of their secret type"""


class PasswordGenerationError(SeedprepError):
    """Password generation preconditions are not met"""


class NoCharacterClassSelected(PasswordGenerationError):
    def __init__(self):
        super().__init__("Select at least one character set")


class EmptyDictionary(PasswordGenerationError):
    def __init__(self, source: str = "word dictionary"):
        self.source = source
        super().__init__(f"{source} is unavailable or empty")
