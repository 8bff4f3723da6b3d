class PipelineFilterError(Exception):
    """Base class for all pipeline filter errors."""


class UnknownEnumToken(PipelineFilterError, ValueError):
    """A wire token did not match any member of the target enum."""

    def __init__(self, enum_name: str, token: object):
        self.enum_name = enum_name
        self.token = token
        super().__init__(f"Unknown {enum_name} token: {token!r}")


class InvalidCombination(PipelineFilterError, ValueError):
    """A leaf filter was combined without a concrete operand."""


class WireFormatError(PipelineFilterError, ValueError):
    """A rendered request does not conform to the wire schema."""


class ResultDecodeError(PipelineFilterError, ValueError):
    """A loan pipeline response row could not be decoded."""


__all__ = [
    "PipelineFilterError",
    "UnknownEnumToken",
    "InvalidCombination",
    "WireFormatError",
    "ResultDecodeError",
]
