from collections import deque
from bitvector import BitVector
from errors import (InsufficientStateError, TooManyTapsError,
                    InsufficientTapsError, InvalidTapSelectorError)

class LFSR:
    """
    Linear feedback shift register over a BitVector.
    Tap t reads bit (size - t); tap 1 is the bit shifted out on the next step.
    Every emitted bit is kept so steps can be undone exactly.
    """
    def __init__(self, initial_state, taps):
        if isinstance(initial_state, str):
            initial_state = BitVector.from_binary_string(initial_state)
        taps = frozenset(taps)

        if initial_state.size < 2:
            raise InsufficientStateError(f"Need at least 2 bits of state, got {initial_state.size}")
        if len(taps) > initial_state.size:
            raise TooManyTapsError(f"Cannot have more taps ({len(taps)}) than state bits ({initial_state.size})")
        if len(taps) < 2:
            raise InsufficientTapsError(f"Need at least 2 taps for an LFSR, got {len(taps)}")
        for t in sorted(taps):
            if t < 1 or t > initial_state.size:
                raise InvalidTapSelectorError(f"Tap {t} is outside [1, {initial_state.size}]")

        if 1 not in taps:
            warning = f"Tap set {sorted(taps)} does not include output tap (1), the oldest bit never feeds back."
            print("Warning:", warning)

        self.size = initial_state.size
        self.taps = taps
        self._initial_state = initial_state.copy()
        self._state = initial_state.copy()
        # Newest output bit at the front
        self._history = deque()

        self.tap_mask = 0
        for t in self.taps:
            self.tap_mask |= (1 << (self.size - t))

    @property
    def state(self) -> BitVector:
        return self._state.copy()

    @property
    def initial_state(self) -> BitVector:
        return self._initial_state.copy()

    @property
    def output_bits(self) -> tuple:
        return tuple(self._history)

    @property
    def steps_taken(self) -> int:
        return len(self._history)

    def get(self, position: int) -> bool:
        return self._state.get(position)

    def _step_once(self):
        feedback = False
        for t in self.taps:
            feedback ^= self._state.get(self.size - t)
        output = self._state.push_right(feedback)
        self._history.appendleft(output)

    def _step_back_once(self):
        # Pinned at the initial state once the history runs out
        if self._history:
            output = self._history.popleft()
            self._state.push_left(output)

    def step(self, n: int = 1):
        """
        XORs all taps into a new bit and pushes it in at index 0.
        The bit pushed out at the top is recorded as output.
        Negative n steps backwards.
        """
        if n > 0:
            for _ in range(n):
                self._step_once()
        else:
            for _ in range(-n):
                self._step_back_once()

    def step_back(self, n: int = 1):
        """
        Undoes steps by pushing recorded output bits back in at the top.
        Stepping back past the initial state is a no-op.
        Negative n steps forwards.
        """
        if n > 0:
            for _ in range(n):
                self._step_back_once()
        else:
            for _ in range(-n):
                self._step_once()

    def reset(self):
        self.step_back(len(self._history))

    def generate(self, n: int) -> list[int]:
        out = []
        for _ in range(n):
            self._step_once()
            out.append(int(self._history[0]))
        return out

    def generate_bytes(self, n_bytes: int) -> bytes:
        """
        Generates n_bytes of output, first emitted bit in the MSB of each byte.
        """
        result = bytearray(n_bytes)
        for i in range(n_bytes):
            byte_val = 0
            for bit in self.generate(8):
                byte_val = (byte_val << 1) | bit
            result[i] = byte_val
        return bytes(result)

    def _commit(self, state_value: int, emitted):
        """Loads a state computed outside the register, recording its emitted bits in order."""
        self._state = BitVector.from_int(state_value, self.size)
        self._history.extendleft(bool(b) for b in emitted)

    def period(self, max_steps=None):
        """
        Steps a probe copy of the register until it comes back to the current state.
        Returns None if that takes more than max_steps, which can happen when tap 1 is missing.
        """
        if max_steps is None:
            max_steps = 2 ** self.size
        probe = self._probe()
        for count in range(1, max_steps + 1):
            probe._step_once()
            if probe._state == self._state:
                return count
        return None

    def _probe(self):
        # Skip __init__ so the tap warning is not printed again
        probe = LFSR.__new__(LFSR)
        probe.size = self.size
        probe.taps = self.taps
        probe.tap_mask = self.tap_mask
        probe._initial_state = self._state.copy()
        probe._state = self._state.copy()
        probe._history = deque()
        return probe

    def __repr__(self):
        return f"LFSR(state='{self._state}', taps={sorted(self.taps)}, steps={len(self._history)})"

if __name__ == "__main__":
    # Loopback test
    lfsr = LFSR("001", {1, 2})
    bits = lfsr.generate(7)
    print(f"Output bits: {bits}, state {lfsr.state}")
    assert lfsr.state == lfsr.initial_state, "3-bit register should return after 7 steps"
    lfsr.step_back(7)
    assert lfsr.steps_taken == 0
    print(f"Period: {lfsr.period()}")
