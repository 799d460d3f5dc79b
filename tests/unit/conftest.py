import pytest

from utils import write_tree


@pytest.fixture
def source_tree(tmp_path):
    return write_tree(
        tmp_path / "a",
        {
            "x.txt": "hi",
            "sub/y.txt": "bye",
        },
    )
