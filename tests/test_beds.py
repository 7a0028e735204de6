"""Tests for the bed pools (General and ICU variants)."""

import pytest
from pydantic import ValidationError

from FrontDesk_V1.domain.beds import (
    BedManager,
    GeneralBedManager,
    ICUBedManager,
    make_bed_manager,
)
from FrontDesk_V1.domain.types import BedCategory


class TestAllocation:
    """Capacity bookkeeping on allocate()."""

    def test_two_beds_three_attempts(self):
        """Pool of 2 gives success, success, failure and ends at 0."""
        beds = GeneralBedManager(capacity=2)
        assert [beds.allocate() for _ in range(3)] == [True, True, False]
        assert beds.remaining == 0

    @pytest.mark.parametrize("capacity,attempts", [(0, 1), (3, 3), (5, 2), (4, 10)])
    def test_remaining_is_capacity_minus_successes(self, capacity, attempts):
        """Remaining = C - N successes and never negative."""
        beds = GeneralBedManager(capacity=capacity)
        successes = sum(beds.allocate() for _ in range(attempts))
        assert successes == min(capacity, attempts)
        assert beds.remaining == capacity - successes
        assert beds.remaining >= 0

    def test_failure_does_not_change_capacity(self, capsys):
        """An exhausted pool reports the shortage and stays at 0."""
        beds = GeneralBedManager(capacity=0)
        assert beds.allocate() is False
        assert beds.remaining == 0
        assert "No general beds available!" in capsys.readouterr().out

    def test_icu_shortage_message(self, capsys):
        """ICU variant uses its own label in the shortage message."""
        beds = ICUBedManager(capacity=0)
        beds.allocate()
        assert "No ICU beds available!" in capsys.readouterr().out


class TestReport:
    """Capacity display."""

    def test_general_report(self, capsys):
        GeneralBedManager(capacity=500).report()
        assert capsys.readouterr().out == "Available General Beds: 500\n"

    def test_icu_report_after_allocation(self, capsys):
        beds = ICUBedManager(capacity=3)
        beds.allocate()
        beds.report()
        assert "Available ICU Beds: 2" in capsys.readouterr().out


class TestFactory:
    """make_bed_manager picks the variant from the category."""

    def test_general(self):
        beds = make_bed_manager(BedCategory.GENERAL, 10)
        assert isinstance(beds, GeneralBedManager)
        assert beds.CATEGORY is BedCategory.GENERAL

    def test_icu(self):
        beds = make_bed_manager(BedCategory.ICU, 10)
        assert isinstance(beds, ICUBedManager)
        assert isinstance(beds, BedManager)
        assert beds.remaining == 10

    def test_negative_capacity_rejected(self):
        """A pool cannot start below zero."""
        with pytest.raises(ValidationError):
            make_bed_manager(BedCategory.ICU, -1)
