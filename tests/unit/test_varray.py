"""Unit tests for GrowableArray."""

from __future__ import annotations

import pytest

from lofreq_core.config import UtilsConfig
from lofreq_core.utils import varray
from lofreq_core.utils.compare import dbl_cmp, int_cmp
from lofreq_core.utils.errors import AllocationFailure, AllocationOverflow
from lofreq_core.utils.varray import GrowableArray

pytestmark = pytest.mark.unit


class TestGrowthPolicy:
    """Tests for capacity growth."""

    def test_starts_empty(self) -> None:
        """Test that a new array holds nothing."""
        a = GrowableArray()
        assert a.length == 0
        assert a.capacity == 0
        assert len(a) == 0

    def test_doubling_capacities(self) -> None:
        """Test that doubling starts at one element and then doubles."""
        a = GrowableArray(growth_increment=0)
        seen = []
        for i in range(9):
            a.append(i)
            seen.append(a.capacity)
        assert seen == [1, 2, 4, 4, 8, 8, 8, 8, 16]

    def test_increment_of_one_doubles(self) -> None:
        """Test that an increment of 1 also selects doubling."""
        a = GrowableArray(growth_increment=1)
        for i in range(3):
            a.append(i)
        assert a.capacity == 4

    def test_fixed_increment(self) -> None:
        """Test that an increment above 1 grows by exactly that amount."""
        a = GrowableArray(growth_increment=5)
        seen = []
        for i in range(11):
            a.append(i)
            seen.append(a.capacity)
        assert seen == [5] * 5 + [10] * 5 + [15]

    def test_default_increment_from_config(self) -> None:
        """Test that the config provides the default policy."""
        a = GrowableArray(cfg=UtilsConfig(growth_increment=3))
        assert a.growth_increment == 3

    @pytest.mark.parametrize("n", [1, 2, 3, 17, 100])
    def test_values_survive_growth(self, n: int) -> None:
        """Test length, capacity and values after n appends."""
        a = GrowableArray()
        for i in range(n):
            a.append(i * 3)
        assert a.length == n
        assert a.capacity >= n
        assert [a[i] for i in range(n)] == [i * 3 for i in range(n)]

    def test_overflow_is_detected_before_growing(self) -> None:
        """Test that growth beyond the size limit raises and keeps state."""
        a = GrowableArray("b", cfg=UtilsConfig(size_limit=4))
        for i in range(4):
            a.append(i)
        with pytest.raises(AllocationOverflow):
            a.append(4)
        assert a.length == 4
        assert a.capacity == 4
        assert a.tolist() == [0, 1, 2, 3]

    def test_rejects_non_numeric_typecode(self) -> None:
        """Test that unsupported typecodes are rejected."""
        with pytest.raises(ValueError, match="Unsupported typecode"):
            GrowableArray("u")

    def test_rejects_negative_increment(self) -> None:
        """Test that a negative increment is rejected."""
        with pytest.raises(ValueError):
            GrowableArray(growth_increment=-1)

    def test_memory_error_raises_allocation_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a failed buffer allocation raises AllocationFailure and keeps state."""
        a = GrowableArray()
        a.append(1)

        def no_memory(*args: object) -> None:
            raise MemoryError

        monkeypatch.setattr(varray, "array", no_memory)
        with pytest.raises(AllocationFailure) as excinfo:
            a.append(2)
        assert isinstance(excinfo.value.__cause__, MemoryError)
        assert a.length == 1
        assert a.capacity == 1
        assert a[0] == 1


class TestFree:
    """Tests for resetting an array."""

    def test_free_resets(self) -> None:
        """Test that free returns the array to the empty state."""
        a = GrowableArray()
        for i in range(5):
            a.append(i)
        a.free()
        assert a.length == 0
        assert a.capacity == 0
        assert a.tolist() == []

    def test_free_is_idempotent(self) -> None:
        """Test that free can be called repeatedly."""
        a = GrowableArray()
        a.free()
        a.free()
        assert a.capacity == 0

    def test_reuse_after_free(self) -> None:
        """Test that growth restarts from one element after free."""
        a = GrowableArray()
        for i in range(5):
            a.append(i)
        a.free()
        a.append(42)
        assert a.capacity == 1
        assert a[0] == 42


class TestAccess:
    """Tests for indexing, iteration and sorting."""

    def test_index_out_of_range(self) -> None:
        """Test that unpopulated slots are not readable."""
        a = GrowableArray()
        for i in range(3):
            a.append(i)
        assert a.capacity == 4
        with pytest.raises(IndexError):
            a[3]

    def test_negative_index(self) -> None:
        """Test that negative indices count from the populated end."""
        a = GrowableArray()
        for i in range(3):
            a.append(i)
        assert a[-1] == 2

    def test_iteration_stops_at_length(self) -> None:
        """Test that iteration yields populated elements only."""
        a = GrowableArray()
        for i in (7, 8, 9):
            a.append(i)
        assert list(a) == [7, 8, 9]

    def test_sort_with_int_cmp(self) -> None:
        """Test sorting with the integer comparator."""
        a = GrowableArray()
        for v in (5, -2, 9, 0):
            a.append(v)
        a.sort(int_cmp)
        assert a.tolist() == [-2, 0, 5, 9]
        assert a.capacity == 4

    def test_sort_doubles(self) -> None:
        """Test sorting a double array with the epsilon comparator."""
        a = GrowableArray("d")
        for v in (2.5, -1.0, 0.25):
            a.append(v)
        a.sort(dbl_cmp)
        assert a.tolist() == [-1.0, 0.25, 2.5]

    def test_repr(self) -> None:
        """Test the debug representation."""
        a = GrowableArray()
        a.append(1)
        assert "length=1" in repr(a)
