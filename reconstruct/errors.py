# every failure raised by the reconstruction core
# all of them are ValueErrors, so callers that only care about "bad input" can catch that


class ReconstructionError(ValueError):
    pass


class InputFormatError(ReconstructionError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed input: {reason}")


class DecodeError(ReconstructionError):
    def __init__(self, key, value, base, reason=None):
        self.key = key
        self.value = value
        self.base = base
        message = f"Failed to decode value {value!r} in base {base!r} for key {key!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InsufficientSamplesError(ReconstructionError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient samples. Expected at least {required}, but found {available}.")


class InvalidSampleError(ReconstructionError):
    def __init__(self, x, reason: str):
        self.x = x
        self.reason = reason
        if x is None:
            super().__init__(f"Invalid samples: {reason}")
        else:
            super().__init__(f"Invalid sample at x = {x}: {reason}")


class SingularInputError(ReconstructionError):
    def __init__(self, x):
        self.x = x
        super().__init__(f"x = {x} appears more than once, interpolation is undefined")


class DuplicateXError(ReconstructionError):
    def __init__(self, x, keys):
        self.x = x
        self.keys = tuple(keys)
        super().__init__(f"Keys {', '.join(repr(k) for k in self.keys)} all refer to x = {x}")
