"""One-shot and streaming hash functions with fixed output sizes."""

from __future__ import annotations

import hashlib
from typing import Callable, ClassVar, Protocol

from Crypto.Hash import RIPEMD160

__all__ = [
    "Hasher",
    "Blake2b",
    "Blake2b32",
    "Sha1",
    "Sha256",
    "Sha3_512",
    "Ripemd160",
    "StreamHasher",
    "Blake2bStream",
    "Blake2b32Stream",
    "Sha1Stream",
    "Sha256Stream",
    "Sha3_512Stream",
    "Ripemd160Stream",
    "Sha256Ripemd160Stream",
    "digest",
]

BytesLike = bytes | bytearray | memoryview


class _Digest(Protocol):
    def update(self, data: BytesLike) -> object: ...

    def digest(self) -> bytes: ...

    def copy(self) -> "_Digest": ...


def _blake2b_512() -> _Digest:
    return hashlib.blake2b(digest_size=64)


def _sha1() -> _Digest:
    return hashlib.sha1()


def _sha256() -> _Digest:
    return hashlib.sha256()


def _sha3_512() -> _Digest:
    return hashlib.sha3_512()


def _ripemd160() -> _Digest:
    return RIPEMD160.new()


class Hasher:
    """A one-shot hash algorithm whose output is truncated to ``output_size`` bytes."""

    output_size: ClassVar[int]
    _factory: ClassVar[Callable[[], _Digest]]

    @classmethod
    def hash(cls, data: BytesLike) -> bytes:
        """Return the hash of ``data``."""
        state = cls._factory()
        state.update(bytes(data))
        return state.digest()[: cls.output_size]


class Blake2b(Hasher):
    """BLAKE2b with a 64-byte output."""

    output_size = 64
    _factory = staticmethod(_blake2b_512)


class Blake2b32(Hasher):
    """The first 32 bytes of a 64-byte BLAKE2b hash."""

    output_size = 32
    _factory = staticmethod(_blake2b_512)


class Sha1(Hasher):
    """SHA-1; kept for legacy use only."""

    output_size = 20
    _factory = staticmethod(_sha1)


class Sha256(Hasher):
    """SHA-256."""

    output_size = 32
    _factory = staticmethod(_sha256)


class Sha3_512(Hasher):
    """SHA3-512."""

    output_size = 64
    _factory = staticmethod(_sha3_512)


class Ripemd160(Hasher):
    """RIPEMD-160."""

    output_size = 20
    _factory = staticmethod(_ripemd160)


class StreamHasher:
    """Incremental hasher; ``finalize`` returns the digest and resets the state."""

    output_size: ClassVar[int]
    _factory: ClassVar[Callable[[], _Digest]]

    def __init__(self) -> None:
        self._state = self._factory()

    def write(self, data: BytesLike) -> "StreamHasher":
        """Feed ``data`` into the hash; returns ``self`` so calls can be chained."""
        self._state.update(bytes(data))
        return self

    def reset(self) -> None:
        """Discard everything written so far."""
        self._state = self._factory()

    def _finalize_inner(self) -> bytes:
        result = self._state.digest()
        self.reset()
        return result

    def finalize(self) -> bytes:
        """Return the digest of the data written and reset the hasher."""
        return self._finalize_inner()[: self.output_size]

    def copy(self) -> "StreamHasher":
        """Return an independent hasher with the same state."""
        clone = type(self).__new__(type(self))
        clone._state = self._state.copy()
        return clone


class Blake2bStream(StreamHasher):
    """Streaming BLAKE2b with a 64-byte output."""

    output_size = 64
    _factory = staticmethod(_blake2b_512)


class Blake2b32Stream(StreamHasher):
    """Streaming BLAKE2b truncated to its first 32 bytes."""

    output_size = 32
    _factory = staticmethod(_blake2b_512)


class Sha1Stream(StreamHasher):
    """Streaming SHA-1."""

    output_size = 20
    _factory = staticmethod(_sha1)


class Sha256Stream(StreamHasher):
    """Streaming SHA-256."""

    output_size = 32
    _factory = staticmethod(_sha256)


class Sha3_512Stream(StreamHasher):
    """Streaming SHA3-512."""

    output_size = 64
    _factory = staticmethod(_sha3_512)


class Ripemd160Stream(StreamHasher):
    """Streaming RIPEMD-160."""

    output_size = 20
    _factory = staticmethod(_ripemd160)


class Sha256Ripemd160Stream(StreamHasher):
    """RIPEMD-160 of the SHA-256 of the streamed data."""

    output_size = 20
    _factory = staticmethod(_sha256)

    def finalize(self) -> bytes:
        return Ripemd160.hash(self._finalize_inner())


def digest(hasher: type[Hasher], data: BytesLike) -> bytes:
    """Hash ``data`` with the given hasher class."""
    return hasher.hash(data)