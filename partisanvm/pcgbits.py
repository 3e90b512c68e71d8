"""Bit-level helpers for permuted congruential random number generators.

Integers are plain Python ints; the width of the emulated machine integer
is passed explicitly as a number of bits.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from itertools import islice

UINT128_MAX = (1 << 128) - 1
_SIZE_MAX = (1 << 64) - 1
_SEED_WORD_BITS = 32


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def _check_width(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def rotl(value: int, rot: int, bits: int) -> int:
    """Rotate ``value`` left by ``rot`` within a ``bits``-wide integer."""
    _check_width(bits)
    mask = _mask(bits)
    value &= mask
    rot %= bits
    return ((value << rot) | (value >> ((-rot) % bits))) & mask


def rotr(value: int, rot: int, bits: int) -> int:
    """Rotate ``value`` right by ``rot`` within a ``bits``-wide integer."""
    _check_width(bits)
    mask = _mask(bits)
    value &= mask
    rot %= bits
    return ((value >> rot) | (value << ((-rot) % bits))) & mask


def unxorshift(x: int, bits: int, shift: int) -> int:
    """Invert ``x ^ (x >> shift)`` for a ``bits``-wide value."""
    if shift <= 0:
        raise ValueError(f"shift must be positive, got {shift}")
    if 2 * shift >= bits:
        return x ^ (x >> shift)
    lowmask1 = (1 << (bits - 2 * shift)) - 1
    top1 = x
    bottom1 = x & lowmask1
    top1 ^= top1 >> shift
    top1 &= ~lowmask1
    x = top1 | bottom1
    lowmask2 = (1 << (bits - shift)) - 1
    bottom2 = unxorshift(x & lowmask2, bits - shift, shift)
    bottom2 &= lowmask1
    return top1 | bottom2


def uneven_copy(
    src: Iterable[int], src_bits: int, dest_bits: int, count: int
) -> list[int]:
    """Repack words of ``src_bits`` into ``count`` words of ``dest_bits``.

    The layout is the one a little-endian memory copy would produce.
    """
    _check_width(src_bits)
    _check_width(dest_bits)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    source = iter(src)
    dest_mask = _mask(dest_bits)
    result: list[int] = []

    if dest_bits < src_bits:
        scale = src_bits // dest_bits
        value = 0
        for index in range(count):
            if index % scale == 0:
                value = next(source)
            else:
                value >>= dest_bits
            result.append(value & dest_mask)
        return result

    scale = -(-dest_bits // src_bits)
    src_mask = _mask(src_bits)
    for _ in range(count):
        words = list(islice(source, scale))
        if len(words) < scale:
            raise ValueError("source ran out of words")
        value = 0
        for position, word in enumerate(words):
            value |= (word & src_mask) << (position * src_bits)
        result.append(value & dest_mask)
    return result


def bounded_rand(rng: Callable[[], int], upper_bound: int, bits: int) -> int:
    """Draw an unbiased integer in ``[0, upper_bound)`` from a ``bits``-wide generator."""
    _check_width(bits)
    if upper_bound <= 0:
        raise ValueError(f"upper bound must be positive, got {upper_bound}")
    span = 1 << bits
    threshold = (span - upper_bound) % upper_bound
    while True:
        r = rng() & (span - 1)
        if r >= threshold:
            return r % upper_bound


def shuffle(items: MutableSequence, rng: Callable[[], int], bits: int) -> None:
    """Shuffle ``items`` in place with a Fisher-Yates walk from the back."""
    count = len(items)
    last = count
    while count > 1:
        chosen = bounded_rand(rng, count, bits)
        count -= 1
        last -= 1
        items[chosen], items[last] = items[last], items[chosen]


def _check_uint128(value: int) -> None:
    if not 0 <= value <= UINT128_MAX:
        raise ValueError(f"value {value} does not fit in 128 unsigned bits")


def format_uint128(value: int, want_hex: bool = False) -> str:
    """Render a 128-bit unsigned integer in decimal or lowercase hex."""
    _check_uint128(value)
    return format(value, "x") if want_hex else str(value)


def parse_uint128(text: str) -> tuple[int, str]:
    """Read a decimal 128-bit unsigned integer from the start of ``text``.

    Leading whitespace is skipped. Returns the value and the unread rest.
    """
    stripped = text.lstrip()
    end = 0
    while end < len(stripped) and "0" <= stripped[end] <= "9":
        end += 1
    if end == 0:
        raise ValueError(f"no decimal digits at start of {text!r}")
    value = int(stripped[:end])
    if value > UINT128_MAX:
        raise OverflowError(f"{stripped[:end]} exceeds 128 unsigned bits")
    return value, stripped[end:]


def arbitrary_seed(text: str, bits: int = 64) -> int:
    """Hash ``text`` into a ``bits``-wide seed with an FNV-style mix."""
    _check_width(bits)
    mask = _mask(bits)
    value = (2166136261 ^ (bits // 8)) & mask
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = ((value * 16777619) ^ signed) & mask
    return value


class SeedSeqFrom:
    """Seed sequence that fills 32-bit seed words from another generator."""

    def __init__(self, rng: Callable[[], int], result_bits: int = 32) -> None:
        _check_width(result_bits)
        self._rng = rng
        self._result_bits = result_bits

    def generate(self, count: int) -> list[int]:
        """Return ``count`` 32-bit seed words."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        word_mask = _mask(_SEED_WORD_BITS)
        return [self._rng() & word_mask for _ in range(count)]

    def size(self) -> int:
        """Number of distinct seed words the underlying generator can yield."""
        rng_max = _mask(self._result_bits)
        if self._result_bits > _SEED_WORD_BITS and rng_max > _SIZE_MAX:
            return _SIZE_MAX
        return rng_max & _SIZE_MAX