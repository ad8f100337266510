"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streamed content hashing with pluggable hash algorithms.

Files are read in fixed-size chunks, so peak memory does not depend on file size.
Read failures raise ChecksumError; callers decide whether to skip the file.
"""

import hashlib
import logging

import xxhash

from reclaimer.core.errors import ChecksumError
from reclaimer.core.interfaces import HashAlgorithm, HashState, Hasher
from reclaimer.core.models import ScanConfig

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    def new(self) -> HashState:
        return xxhash.xxh64()


class MD5AlgorithmImpl(HashAlgorithm):
    name = "md5"

    def new(self) -> HashState:
        return hashlib.md5()


HASH_ALGORITHMS = {
    XXHashAlgorithmImpl.name: XXHashAlgorithmImpl,
    MD5AlgorithmImpl.name: MD5AlgorithmImpl,
}


def get_algorithm(name: str) -> HashAlgorithm:
    """Looks up a hash algorithm by name ("xxh64", "md5")."""
    try:
        return HASH_ALGORITHMS[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}. Supported: {sorted(HASH_ALGORITHMS)}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = ScanConfig.HASH_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def checksum(self, path: str) -> str:
        """
        Hex digest of the whole file content.

        Raises:
            ChecksumError: If the file cannot be opened or read
        """
        state = self.algorithm.new()
        try:
            with open(path, "rb") as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b""):
                    state.update(chunk)
        except OSError as e:
            logger.debug(f"Failed to hash {path}: {e}")
            raise ChecksumError(str(path), e.strerror or str(e)) from e
        return state.hexdigest()
