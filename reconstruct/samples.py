from dataclasses import dataclass
from .decoder import decode
from .errors import InputFormatError, InsufficientSamplesError, DuplicateXError, DecodeError

# key of the metadata object in the input document ({"keys": {"n": 4, "k": 3}, "1": {...}, ...})
RESERVED_KEY = "keys"

DUPLICATE_POLICIES = ("reject", "last")


@dataclass(frozen=True)
class Sample:
    x: int
    y: int


@dataclass(frozen=True)
class ShareEntry:
    key: str  # key as written in the input, kept for error messages
    x: int
    encoded_value: str
    base: int


@dataclass(frozen=True)
class ShareInput:
    required_count: int
    entries: tuple[ShareEntry, ...]
    declared_count: int | None = None  # keys.n, informational only


@dataclass(frozen=True)
class SampleSet:
    """
    every usable sample, sorted by ascending x, with no x repeated
    the first `required_count` of them form the interpolation basis
    """
    samples: tuple[Sample, ...]
    required_count: int

    @property
    def basis(self) -> tuple[Sample, ...]:
        return self.samples[:self.required_count]

    @property
    def xs(self) -> list[int]:
        return [s.x for s in self.samples]

    @property
    def ys(self) -> list[int]:
        return [s.y for s in self.samples]

    def __len__(self):
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)


def parse_key(key) -> int | None:
    # only plain non-negative decimal integers ("7", "07") count as x values
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None


def parse_count(value, name: str) -> int:
    # counts may be written as json numbers or as decimal strings
    if isinstance(value, bool):
        raise InputFormatError(f"'{name}' must be an integer, got {value!r}")
    if isinstance(value, int):
        count = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        count = int(value.strip())
    else:
        raise InputFormatError(f"'{name}' must be an integer, got {value!r}")

    if count < 1:
        raise InputFormatError(f"'{name}' must be at least 1, got {count}")
    return count


def parse_base(key, value, base) -> int:
    if isinstance(base, bool):
        raise InputFormatError(f"base of key {key!r} must be an integer, got {base!r}")
    if isinstance(base, int):
        return base
    if isinstance(base, str) and base.strip().isascii() and base.strip().isdigit():
        return int(base.strip())
    # a base we cannot even read means the value cannot be decoded
    raise DecodeError(key, value, base, "base is not an integer")


def entries_from_mapping(raw) -> list[ShareEntry]:
    """
    Turn the raw {key: {"value": ..., "base": ...}} mapping into ShareEntry objects, in mapping order.
    Skips the reserved metadata key, keys that are not integers, and entries with a missing value or base.
    """
    entries = []
    for key, entry in raw.items():
        if key == RESERVED_KEY:
            continue

        x = parse_key(key)
        if x is None:
            continue

        if not isinstance(entry, dict):
            raise InputFormatError(f"entry for key {key!r} must be an object with 'value' and 'base'")

        value = entry.get("value")
        base = entry.get("base")
        if not value or not base:
            continue

        entries.append(ShareEntry(key=str(key), x=x, encoded_value=str(value), base=parse_base(key, value, base)))

    return entries


def share_input_from_document(document) -> ShareInput:
    """
    Validate a parsed json document once and convert it to a ShareInput.
    The document must be an object with a "keys" object holding "k" (and optionally "n").
    """
    if not isinstance(document, dict):
        raise InputFormatError("document must be a json object")

    metadata = document.get(RESERVED_KEY)
    if not isinstance(metadata, dict) or "k" not in metadata:
        raise InputFormatError(f"missing the '{RESERVED_KEY}.k' property")

    required_count = parse_count(metadata["k"], f"{RESERVED_KEY}.k")
    declared_count = parse_count(metadata["n"], f"{RESERVED_KEY}.n") if "n" in metadata else None

    return ShareInput(required_count=required_count,
                      entries=tuple(entries_from_mapping(document)),
                      declared_count=declared_count)


def build_sample_set(share_input: ShareInput, drop_zero_values: bool = True, duplicate_x: str = "reject") -> SampleSet:
    """
    Decode every entry and produce the sorted SampleSet.

    Args:
        drop_zero_values: if True, samples with x = 0 or a decoded y of 0 are treated as missing and dropped
        duplicate_x: "reject" raises DuplicateXError when two entries share an x, "last" keeps the last one seen
    """
    if duplicate_x not in DUPLICATE_POLICIES:
        raise ValueError(f"duplicate_x must be one of {'/'.join(DUPLICATE_POLICIES)}, got {duplicate_x!r}")

    by_x = {}
    keys_by_x = {}
    for entry in share_input.entries:
        # x = 0 counts as missing, so its value is never decoded
        if drop_zero_values and entry.x == 0:
            continue

        y = decode(entry.encoded_value, entry.base, key=entry.key)
        if drop_zero_values and y == 0:
            continue

        if entry.x in by_x and duplicate_x == "reject":
            raise DuplicateXError(entry.x, keys_by_x[entry.x] + [entry.key])

        keys_by_x.setdefault(entry.x, []).append(entry.key)
        by_x[entry.x] = Sample(entry.x, y)

    if len(by_x) < share_input.required_count:
        raise InsufficientSamplesError(share_input.required_count, len(by_x))

    samples = tuple(by_x[x] for x in sorted(by_x))
    return SampleSet(samples, share_input.required_count)


def build(raw, k: int, drop_zero_values: bool = True, duplicate_x: str = "reject") -> SampleSet:
    """Build a SampleSet straight from the raw mapping, with `k` given separately."""
    share_input = ShareInput(required_count=parse_count(k, "k"), entries=tuple(entries_from_mapping(raw)))
    return build_sample_set(share_input, drop_zero_values, duplicate_x)
