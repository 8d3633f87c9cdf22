"""Signed fixed-width integer range used for parsing and checked arithmetic."""
import sys

from pydantic import BaseModel, ConfigDict, Field


# Width of the platform's native signed word (64 on 64-bit interpreters)
NATIVE_BITS: int = sys.maxsize.bit_length() + 1


class IntegerBounds(BaseModel):
    """
    Two's complement range of a signed integer with a given bit width.

    Every number accepted by the parser and every intermediate result of the
    evaluator must lie inside this range.
    """

    # Bounds are shared by parser and evaluator, keep them read-only
    model_config = ConfigDict(frozen=True)

    bits: int = Field(default=NATIVE_BITS, ge=8, le=128, description="Signed integer width in bits")

    @property
    def minimum(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1))

    @property
    def maximum(self) -> int:
        """Largest representable value."""
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """Return True if value is representable."""
        return self.minimum <= value <= self.maximum


NATIVE_BOUNDS = IntegerBounds()
