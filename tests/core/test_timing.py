"""
Tests for the execution Timer.
"""

import pytest

from pyanova.core.timing import Timer


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        with timer.section('b'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a', 'b'}
        assert all(v >= 0 for v in result.values())

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_phases_keep_entry_order(self):
        timer = Timer()
        timer.start()
        for name in ('validation', 'sums_of_squares', 'validation', 'f_test'):
            with timer.section(name):
                pass
        timer.stop()
        assert list(timer.result()) == [
            'total_seconds', 'validation', 'sums_of_squares', 'f_test',
        ]
