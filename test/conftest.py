import pytest

# Fixture that writes raw bytes to a file in the test's
# temporary directory and returns its path as a string.  E.g.
#
#   def test_something(write_file):
#       path = write_file(b"aaab\n")
#
@pytest.fixture
def write_file(tmp_path):
    def _write(data: bytes, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write
