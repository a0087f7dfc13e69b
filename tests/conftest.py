import random

import pytest


@pytest.fixture
def make_file(tmp_path):
    def _make(size=None, data=None, name="sample.bin", seed=1234):
        if data is None:
            data = random.Random(seed).randbytes(size)
        path = tmp_path / name
        path.write_bytes(data)
        return path, data
    return _make
