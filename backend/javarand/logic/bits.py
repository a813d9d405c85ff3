"""Two's-complement reinterpretation of Python ints at fixed widths.

Python ints are unbounded, so every narrowing from the reference
algorithm is spelled out here: keep the low ``width`` bits and read
them back as either signed or unsigned. None of these are value
preserving casts.
"""


def to_unsigned(value: int, width: int) -> int:
    """Return the low ``width`` bits of ``value`` as an unsigned int."""
    return value & ((1 << width) - 1)


def to_signed(value: int, width: int) -> int:
    """Return the low ``width`` bits of ``value`` read as two's complement."""
    value = to_unsigned(value, width)
    if value >= 1 << (width - 1):
        value -= 1 << width
    return value


def to_i8(value: int) -> int:
    return to_signed(value, 8)


def to_u8(value: int) -> int:
    return to_unsigned(value, 8)


def to_i32(value: int) -> int:
    return to_signed(value, 32)


def to_u32(value: int) -> int:
    return to_unsigned(value, 32)


def to_i64(value: int) -> int:
    return to_signed(value, 64)


def to_u64(value: int) -> int:
    return to_unsigned(value, 64)
