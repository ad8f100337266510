"""
Unit tests for HasherImpl with the xxHash64 and MD5 algorithms.
"""
import hashlib

import pytest
import xxhash

from reclaimer.core.errors import ChecksumError
from reclaimer.core.hasher import HasherImpl, MD5AlgorithmImpl, XXHashAlgorithmImpl, get_algorithm


class TestHasherImpl:

    def test_default_algorithm_is_xxh64(self, temp_dir):
        path = temp_dir / "data.bin"
        path.write_bytes(b"hello world")

        assert HasherImpl().checksum(str(path)) == xxhash.xxh64(b"hello world").hexdigest()

    def test_md5_matches_hashlib(self, temp_dir):
        path = temp_dir / "data.bin"
        content = b"A" * 5000
        path.write_bytes(content)

        hasher = HasherImpl(MD5AlgorithmImpl())
        assert hasher.checksum(str(path)) == hashlib.md5(content).hexdigest()

    def test_chunked_reading_gives_same_digest(self, temp_dir):
        """A chunk size smaller than the file must not change the digest."""
        path = temp_dir / "data.bin"
        content = bytes(range(256)) * 40
        path.write_bytes(content)

        small_chunks = HasherImpl(XXHashAlgorithmImpl(), chunk_size=7)
        whole = HasherImpl(XXHashAlgorithmImpl(), chunk_size=1024 * 1024)
        assert small_chunks.checksum(str(path)) == whole.checksum(str(path))

    def test_identical_content_identical_digest(self, temp_dir):
        a = temp_dir / "a.txt"
        b = temp_dir / "b.txt"
        c = temp_dir / "c.txt"
        a.write_bytes(b"same content")
        b.write_bytes(b"same content")
        c.write_bytes(b"other content")

        hasher = HasherImpl()
        assert hasher.checksum(str(a)) == hasher.checksum(str(b))
        assert hasher.checksum(str(a)) != hasher.checksum(str(c))

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty"
        path.write_bytes(b"")
        assert HasherImpl().checksum(str(path)) == xxhash.xxh64(b"").hexdigest()

    def test_missing_file_raises_checksum_error(self, temp_dir):
        missing = temp_dir / "missing.bin"

        with pytest.raises(ChecksumError) as exc_info:
            HasherImpl().checksum(str(missing))

        assert exc_info.value.path == str(missing)
        assert "Cannot hash" in str(exc_info.value)
        # Callers that only know OSError still catch it
        assert isinstance(exc_info.value, OSError)

    def test_directory_raises_checksum_error(self, temp_dir):
        with pytest.raises(ChecksumError):
            HasherImpl().checksum(str(temp_dir))

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="Chunk size"):
            HasherImpl(chunk_size=0)


class TestGetAlgorithm:

    def test_lookup_by_name(self):
        assert isinstance(get_algorithm("xxh64"), XXHashAlgorithmImpl)
        assert isinstance(get_algorithm(" MD5 "), MD5AlgorithmImpl)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            get_algorithm("sha999")
