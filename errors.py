# Exceptions raised by the bit vector and the shift register

class LFSRError(Exception):
    pass

class InvalidSizeError(LFSRError, ValueError):
    pass

class InvalidDigitError(LFSRError, ValueError):
    pass

class IndexOutOfRangeError(LFSRError, IndexError):
    pass

class InsufficientStateError(LFSRError, ValueError):
    pass

class TooManyTapsError(LFSRError, ValueError):
    pass

class InsufficientTapsError(LFSRError, ValueError):
    pass

class InvalidTapSelectorError(LFSRError, ValueError):
    pass
