# Bulk keystream generation for an LFSR using a compiled stepping kernel
from LFSR import LFSR
import numpy as np
from numba import jit

# Widest register the int64 kernel handles without touching the sign bit
MAX_JIT_WIDTH = 62

# JIT-compiled kernel for high performance
@jit(nopython=True)
def _keystream_jit(n, state, tap_mask, width):
    out = np.empty(n, dtype=np.uint8)
    top = width - 1
    low_mask = (1 << top) - 1

    for i in range(n):
        # Calculate feedback (popcount of masked state)
        masked = state & tap_mask
        # Manual popcount compatible with Numba
        c = 0
        v = masked
        while v > 0:
            v &= (v - 1)
            c += 1
        feedback = c & 1

        out[i] = (state >> top) & 1
        state = ((state & low_mask) << 1) | feedback

    return out, state

class Keystream:
    def __init__(self, register: LFSR):
        self.register = register

    def generate_bits(self, n):
        if n < 0:
            raise ValueError(f"Number of bits must be non-negative, got {n}")
        lfsr = self.register
        if lfsr.size > MAX_JIT_WIDTH:
            return np.array(lfsr.generate(n), dtype=np.uint8)

        # We pass the raw state integers to avoid object overhead
        bits, new_state = _keystream_jit(
            n,
            lfsr.state.value,
            lfsr.tap_mask,
            lfsr.size
        )
        assert len(bits) == n, "Kernel returned the wrong number of bits"

        # Update the LFSR object state and history so it can still step back
        lfsr._commit(int(new_state), bits)
        return bits

    def generate_bytes(self, n_bytes):
        bits = self.generate_bits(8 * n_bytes)
        # MSB first packing to match LFSR.generate_bytes
        return np.packbits(bits).tobytes()

if __name__ == "__main__":
    from config import Config
    cfg = Config()

    # Compare the kernel with plain stepping
    ks = Keystream(cfg.build())
    reference = cfg.build()
    fast = ks.generate_bytes(64)
    slow = reference.generate_bytes(64)
    assert fast == slow, "Kernel and step() disagree"
    assert ks.register.state == reference.state
    print("Keystream matches step-by-step output!")

    period = ks.register.period()
    print(f"Period: {period} (max {cfg.max_period})")

    from time import time
    # Performance test
    print("Starting performance test with 1 MB of keystream...")
    ks = Keystream(cfg.build())
    start_time = time()
    ks.generate_bytes(1_000_000)
    end_time = time()
    print(f"Generated 1 MB of keystream in {end_time - start_time:.2f} seconds.")
    start_time = time()
    ks.register.reset()
    end_time = time()
    print(f"Stepped back 8M steps in {end_time - start_time:.2f} seconds.")
    assert ks.register.state == ks.register.initial_state
