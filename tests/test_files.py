import pytest

from bin2bmp.errors import B2BError
from bin2bmp.files import bin_name, bin_to_bmp, bmp_name, bmp_to_bin, convert, is_bmp
from bin2bmp.header import VerificationOutcome


def test_names(tmp_path):
    assert bmp_name(tmp_path / "a.tar.gz").name == "a.tar.gz.bmp"
    assert bin_name(tmp_path / "a.tar.gz.bmp").name == "a.tar.gz"
    assert is_bmp("x.bmp") and not is_bmp("x.bin")
    assert not is_bmp("X.BMP")


def test_roundtrip_with_rename(make_file):
    path, data = make_file(2048, name="archive.zip")
    bmp = bin_to_bmp(path, compute_digest=True)
    assert bmp.name == "archive.zip.bmp"
    assert not path.exists()
    assert bmp.read_bytes()[:2] == b"BM"

    restored, outcome = bmp_to_bin(bmp, verify=True)
    assert restored == path
    assert not bmp.exists()
    assert restored.read_bytes() == data
    assert outcome is VerificationOutcome.VERIFIED


def test_in_place(make_file):
    path, data = make_file(10)
    assert bin_to_bmp(path, rename=False) == path
    assert path.read_bytes()[:2] == b"BM"
    dst, outcome = bmp_to_bin(path, rename=False)
    assert dst == path and outcome is None
    assert path.read_bytes() == data


def test_failure_leaves_source_untouched(make_file):
    path, data = make_file(data=b"BM" + bytes(400), name="fake.bmp")
    with pytest.raises(B2BError):
        bmp_to_bin(path)
    assert path.read_bytes() == data
    assert sorted(p.name for p in path.parent.iterdir()) == ["fake.bmp"]


def test_convert_dispatches_on_suffix(make_file):
    path, data = make_file(data=b"hello", name="note.txt")
    bmp, outcome = convert(path, digest=True)
    assert bmp.name == "note.txt.bmp" and outcome is None
    restored, outcome = convert(bmp, digest=True)
    assert restored.read_bytes() == data
    assert outcome is VerificationOutcome.VERIFIED


def test_uppercase_suffix_is_converted_forward(make_file):
    path, data = make_file(data=b"BM" + bytes(400), name="photo.BMP")
    bmp, outcome = convert(path)
    assert bmp.name == "photo.BMP.bmp" and outcome is None
    restored, _ = convert(bmp)
    assert restored == path
    assert restored.read_bytes() == data
