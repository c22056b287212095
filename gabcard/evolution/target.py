"""Conversion between target text and gene code arrays."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from gabcard.config import Config

# Character codes wrap like UTF-16 code units when rendered.
CODE_UNIT_MODULUS = 0x10000


def encode_target(
    target: str | bytes | Sequence[int] | np.ndarray,
    config: type[Config] | None = None,
) -> np.ndarray:
    """Encode a target into a read-only int64 code array.

    Raises:
        ValueError: If the target is empty or holds a code outside
            ``[GENE_MIN, GENE_MAX]``.
    """

    cfg = config or Config
    if isinstance(target, str):
        codes = np.array([ord(ch) for ch in target], dtype=np.int64)
    elif isinstance(target, (bytes, bytearray)):
        codes = np.frombuffer(bytes(target), dtype=np.uint8).astype(np.int64)
    else:
        codes = np.array(target, dtype=np.int64).reshape(-1)

    if codes.size == 0:
        raise ValueError("target must not be empty")

    out_of_range = (codes < cfg.GENE_MIN) | (codes > cfg.GENE_MAX)
    if np.any(out_of_range):
        position = int(np.argmax(out_of_range))
        raise ValueError(
            f"target code {int(codes[position])} at position {position} is outside "
            f"[{cfg.GENE_MIN}, {cfg.GENE_MAX}]"
        )

    codes.setflags(write=False)
    return codes


def decode_codes(codes: Sequence[int] | np.ndarray) -> str:
    """Decode gene codes into text, wrapping drifted values."""

    return "".join(chr(int(code) % CODE_UNIT_MODULUS) for code in codes)
