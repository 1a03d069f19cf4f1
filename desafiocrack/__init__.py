"""Known-hint recovery of XOR/rotation-encrypted RLE and LZ78 data, with a report mode for known parameters."""

__version__ = "0.1.0"