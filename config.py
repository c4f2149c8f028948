from LFSR import LFSR

class Config:
    def __init__(self, seed="010101010", taps=(1, 5)):
        # 9 bits with taps {1, 5} is x^9 + x^5 + 1, a maximal length register
        self.seed = seed
        self.taps = frozenset(taps)

        self.width = len(self.seed)
        self.max_period = 2 ** self.width - 1

        print(f"Register: {self.width} bits, seed {self.seed}, taps {sorted(self.taps)}")
        print(f"Longest possible period: {self.max_period} steps")

    def build(self):
        return LFSR(self.seed, self.taps)
