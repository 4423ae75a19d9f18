import pytest

from courtgrouper.exceptions import UnsupportedRosterSizeException
from courtgrouper.grouping.court_format import resolve_format


@pytest.mark.parametrize(
    "count, expected",
    [
        (4, (1, 1, 1, 1)),
        (5, (1, 2, 1, 1)),
        (6, (2, 2, 1, 1)),
        (7, (2, 2, 2, 1)),
        (8, (2, 2, 2, 2)),
    ],
)
def test_resolve_format(count, expected):
    sizes = resolve_format(count)
    assert sizes == expected
    assert sum(sizes) == count


@pytest.mark.parametrize("count", [0, 3, 9, -1])
def test_resolve_format_rejects_unsupported_sizes(count):
    with pytest.raises(UnsupportedRosterSizeException) as excinfo:
        resolve_format(count)
    assert "Unsupported player count" in str(excinfo.value)
    assert excinfo.value.size == count
