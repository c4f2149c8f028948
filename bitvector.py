import numpy as np
from errors import InvalidSizeError, InvalidDigitError, IndexOutOfRangeError

class BitVector:
    """
    Fixed-size vector of bits that can be shifted from either end.
    Bit 0 is the least significant bit and is printed rightmost.
    """
    def __init__(self, size: int):
        if size <= 0:
            raise InvalidSizeError(f"Size must be > 0, got {size}")
        self.size = size
        self._mask = (1 << size) - 1
        self._value = 0

    @classmethod
    def from_binary_string(cls, binary: str) -> "BitVector":
        if not binary:
            raise InvalidSizeError("Size must be > 0, got an empty binary string")
        for k, c in enumerate(binary):
            if c not in "01":
                raise InvalidDigitError(f"Character {c!r} at position {k} is not a binary digit")
        vec = cls(len(binary))
        # Leftmost character is the most significant bit
        vec._value = int(binary, 2)
        return vec

    @classmethod
    def from_int(cls, value: int, size: int) -> "BitVector":
        vec = cls(size)
        vec._value = value & vec._mask
        return vec

    def copy(self) -> "BitVector":
        # ints are immutable, nothing is shared
        return BitVector.from_int(self._value, self.size)

    @property
    def value(self) -> int:
        return self._value

    def _check_index(self, position):
        if position < 0 or position >= self.size:
            raise IndexOutOfRangeError(f"Index {position} is out of bounds for size {self.size}")

    def get(self, position: int) -> bool:
        self._check_index(position)
        return bool((self._value >> position) & 1)

    def set(self, position: int):
        self._check_index(position)
        self._value |= (1 << position)

    def clear(self, position: int):
        self._check_index(position)
        self._value &= ~(1 << position)

    def push_left(self, bit: bool) -> bool:
        """
        Pushes the bit in at the most significant end.
        Returns the bit shifted out at index 0.
        """
        evicted = bool(self._value & 1)
        self._value >>= 1
        if bit:
            self._value |= (1 << (self.size - 1))
        return evicted

    def push_right(self, bit: bool) -> bool:
        """
        Pushes the bit in at index 0.
        Returns the bit shifted out at the most significant end.
        """
        evicted = bool((self._value >> (self.size - 1)) & 1)
        self._value = (self._value << 1) & self._mask
        if bit:
            self._value |= 1
        return evicted

    def to_numpy(self) -> np.ndarray:
        """Bits as a uint8 array, index 0 first."""
        return np.fromiter((int(b) for b in self), dtype=np.uint8, count=self.size)

    def __iter__(self):
        for i in range(self.size):
            yield self.get(i)

    def __len__(self):
        return self.size

    def __str__(self):
        return format(self._value, f"0{self.size}b")

    def __repr__(self):
        return f"BitVector('{self}')"

    def __eq__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.size == other.size and self._value == other._value

    def __hash__(self):
        return hash((self.size, self._value))

if __name__ == "__main__":
    # Quick shift check
    vec = BitVector.from_binary_string("11000")
    out = vec.push_right(True)
    assert out is True and str(vec) == "10001"
    out = vec.push_left(False)
    assert out is True and str(vec) == "01000"
    print(f"BitVector self-test passed: {vec!r}")
