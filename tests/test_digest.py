from hashlib import blake2b

from bin2bmp.digest import file_digest, path_digest, truncate


def _expected(data: bytes) -> int:
    return int.from_bytes(blake2b(data, digest_size=32).digest()[:16], "big")


def test_truncate_takes_leading_bytes_big_endian():
    raw = bytes(range(32))
    assert truncate(raw) == int.from_bytes(bytes(range(16)), "big")
    assert truncate(raw).bit_length() <= 128


def test_digest_spans_chunks(make_file):
    path, data = make_file(3000)
    assert path_digest(path) == _expected(data)


def test_digest_reads_from_start(make_file):
    path, data = make_file(10)
    with open(path, "rb") as f:
        f.seek(7)
        assert file_digest(f) == _expected(data)
        assert f.tell() == len(data)


def test_empty_file(make_file):
    path, _ = make_file(data=b"")
    assert path_digest(path) == _expected(b"")


def test_different_content_different_digest(make_file):
    a, _ = make_file(data=b"abc", name="a")
    b, _ = make_file(data=b"abd", name="b")
    assert path_digest(a) != path_digest(b)
