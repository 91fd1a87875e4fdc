"""SHA-3 hashing built on the Keccak-f[1600] permutation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

ROUNDS = 24
STATE_BYTES = 200
_MASK = (1 << 64) - 1

_ROTATIONS = (1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14, 27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44)
_PI_LANES = (10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4, 15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1)


def _round_constants() -> tuple[int, ...]:
    """Iota round constants, produced by the Keccak LFSR."""
    constants = []
    register = 1
    for _ in range(ROUNDS):
        rc = 0
        for j in range(7):
            register = ((register << 1) ^ ((register >> 7) * 0x71)) % 256
            if register & 2:
                rc ^= 1 << ((1 << j) - 1)
        constants.append(rc)
    return tuple(constants)


_ROUND_CONSTANTS = _round_constants()


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (64 - n))) & _MASK


def keccak_f(state: Sequence[int]) -> list[int]:
    """Apply the Keccak-f[1600] permutation to 25 lanes of 64 bits; returns new lanes."""
    st = list(state)
    if len(st) != 25:
        raise ValueError("state must have 25 lanes")
    if any(not 0 <= lane <= _MASK for lane in st):
        raise ValueError("lanes must be unsigned 64-bit integers")
    for rc in _ROUND_CONSTANTS:
        parity = [st[i] ^ st[i + 5] ^ st[i + 10] ^ st[i + 15] ^ st[i + 20] for i in range(5)]
        for i in range(5):
            t = parity[(i + 4) % 5] ^ _rotl(parity[(i + 1) % 5], 1)
            for j in range(i, 25, 5):
                st[j] ^= t
        carried = st[1]
        for rotation, lane in zip(_ROTATIONS, _PI_LANES):
            st[lane], carried = _rotl(carried, rotation), st[lane]
        for j in range(0, 25, 5):
            row = st[j : j + 5]
            for i in range(5):
                st[j + i] = row[i] ^ (~row[(i + 1) % 5] & row[(i + 2) % 5])
        st[0] ^= rc
    return st


def _permute(buffer: bytearray) -> None:
    lanes = [int.from_bytes(buffer[k : k + 8], "little") for k in range(0, STATE_BYTES, 8)]
    buffer[:] = b"".join(lane.to_bytes(8, "little") for lane in keccak_f(lanes))


def sha3(message: bytes | str, bits: int) -> bytes:
    """SHA-3 digest of ``message`` with a ``bits``-bit output."""
    if bits % 8 or not 0 < bits // 8 < STATE_BYTES // 2:
        raise ValueError(f"unsupported digest size: {bits}")
    data = message.encode() if isinstance(message, str) else bytes(message)
    digest_size = bits // 8
    rate = STATE_BYTES - 2 * digest_size
    state = bytearray(STATE_BYTES)
    position = 0
    for byte in data:
        state[position] ^= byte
        position += 1
        if position >= rate:
            _permute(state)
            position = 0
    state[position] ^= 0x06
    state[rate - 1] ^= 0x80
    _permute(state)
    return bytes(state[:digest_size])


def sha3_512_hex(message: bytes | str) -> str:
    """Upper-case hexadecimal SHA3-512 digest."""
    return sha3(message, 512).hex().upper()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the SHA3-512 hash of the first argument, if one is given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print(sha3_512_hex(args[0]))
    return 0