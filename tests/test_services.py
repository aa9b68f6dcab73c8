"""
Tests for service layer components.

Tests DemonstrationService output and the command-line entry point.
"""

import logging

import pytest
from unittest.mock import Mock, patch
from algokit.services.demonstration_service import DemonstrationService
from algokit.config.settings import Settings, set_settings
from algokit.validators.order_validator import SortedOrderValidator
import main


class TestDemonstrationService:
    """Test DemonstrationService demonstrations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = DemonstrationService(settings=Settings())

    def test_linked_list_demonstration(self):
        """Test the linked list demonstration output."""
        result = self.service.demonstrate_linked_list()

        assert result.is_success()
        lines = result.get_value()
        assert "List: 20 -> 10 -> 30 -> 40" in lines
        assert "Contains 30? True" in lines
        assert "Contains 50? False" in lines
        assert "Value at index 3: 40" in lines
        assert "List: 20 -> 10 -> 40" in lines
        assert lines[-2:] == ["List: 10 -> 40", "Count: 2"]

    def test_quick_sort_demonstration(self):
        """Test the quick sort demonstration output."""
        result = self.service.demonstrate_quick_sort()

        assert result.is_success()
        lines = result.get_value()
        assert "Sorted array:   [5, 11, 12, 22, 25, 34, 64, 90]" in lines
        assert "Large array (15 elements):" in lines

    def test_quick_sort_demonstration_keeps_settings(self):
        """Test the configured array is not mutated."""
        settings = Settings()
        original = list(settings.demo_sort_values)
        DemonstrationService(settings=settings).demonstrate_quick_sort()

        assert settings.demo_sort_values == original

    def test_binary_search_demonstration(self):
        """Test the binary search demonstration output."""
        result = self.service.demonstrate_binary_search()

        assert result.is_success()
        lines = result.get_value()
        assert "Element 16 found at index 4" in lines
        assert "Element 45 found at index 7" in lines
        assert "Element 100 not found in the array" in lines
        assert "Element 23 found at index 5" in lines
        assert "First occurrence of 5 at index 1" in lines

    def test_binary_search_demonstration_missing_targets(self, monkeypatch):
        """Test configured arrays without the demo targets report not found."""
        monkeypatch.setenv('DEMO_SEARCH_VALUES', '1,2,3')
        monkeypatch.setenv('DEMO_DUPLICATE_VALUES', '7,7,8')
        result = DemonstrationService(settings=Settings()).demonstrate_binary_search()

        assert result.is_success()
        lines = result.get_value()
        assert "Element 23 not found in the array" in lines
        assert "Element 5 not found in the array" in lines
        assert not any("index -1" in line for line in lines)

    def test_binary_search_demonstration_configured_targets(self, monkeypatch):
        """Test the recursive and first-occurrence targets come from settings."""
        monkeypatch.setenv('DEMO_SEARCH_VALUES', '1,2,3')
        monkeypatch.setenv('DEMO_DUPLICATE_VALUES', '7,7,8')
        monkeypatch.setenv('DEMO_RECURSIVE_TARGET', '3')
        monkeypatch.setenv('DEMO_FIRST_OCCURRENCE_TARGET', '7')
        result = DemonstrationService(settings=Settings()).demonstrate_binary_search()

        lines = result.get_value()
        assert "Element 3 found at index 2" in lines
        assert "First occurrence of 7 at index 0" in lines

    def test_run_all(self):
        """Test run_all concatenates every demonstration."""
        result = self.service.run_all()

        assert result.is_success()
        lines = result.get_value()
        assert lines[0] == "=== Linked list demonstration ==="
        assert "=== Quick sort demonstration ===" in lines
        assert "=== Binary search demonstration ===" in lines

    def test_run_all_stops_on_failure(self):
        """Test run_all returns the first failure."""
        with patch(
            'algokit.services.demonstration_service.quick_sort.sort',
            side_effect=RuntimeError("broken")
        ):
            result = self.service.run_all()

        assert result.is_failure()
        assert "Quick sort demonstration failed" in result.get_error()


class TestAdHocOperations:
    """Test sort_values and search_values."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = DemonstrationService(settings=Settings())

    def test_sort_values_returns_copy(self):
        """Test sort_values leaves the input untouched."""
        values = [3, 1, 2]
        result = self.service.sort_values(values)

        assert result.get_value() == [1, 2, 3]
        assert values == [3, 1, 2]

    def test_sort_values_none(self):
        """Test sort_values with no input fails."""
        assert self.service.sort_values(None).is_failure()

    @pytest.mark.parametrize("mode,expected", [
        ('iterative', 7),
        ('recursive', 7),
        ('first', 7),
    ])
    def test_search_values_modes(self, mode, expected):
        """Test each search mode."""
        values = [2, 5, 8, 12, 16, 23, 38, 45, 67, 78, 90]
        result = self.service.search_values(values, 45, mode)

        assert result.is_success()
        assert result.get_value() == expected

    def test_search_values_first_with_duplicates(self):
        """Test first mode returns the leftmost duplicate."""
        result = self.service.search_values([1, 3, 3, 3, 4], 3, 'first')

        assert result.get_value() == 1

    def test_search_values_unknown_mode(self):
        """Test an unknown mode fails."""
        result = self.service.search_values([1, 2], 1, 'linear')

        assert result.is_failure()
        assert "Unknown search mode" in result.get_error()

    def test_search_values_none_iterative(self):
        """Test None input surfaces the invalid-argument error as a failure."""
        result = self.service.search_values(None, 1, 'iterative')

        assert result.is_failure()
        assert "must not be None" in result.get_error()

    def test_unsorted_input_warns(self, caplog):
        """Test unsorted input logs a warning but still searches."""
        with caplog.at_level(logging.WARNING):
            result = self.service.search_values([3, 1, 2], 7)

        assert result.is_success()
        assert result.get_value() == -1
        assert "not sorted ascending" in caplog.text

    def test_order_check_disabled(self):
        """Test the validator is skipped when verification is disabled."""
        settings = Settings()
        settings.verify_sorted_input = False
        validator = Mock(spec=SortedOrderValidator)
        service = DemonstrationService(settings=settings, order_validator=validator)

        service.search_values([3, 1, 2], 1)

        validator.validate.assert_not_called()


class TestMain:
    """Test the command-line entry point."""

    def setup_method(self):
        """Start every run from freshly loaded settings."""
        set_settings(None)

    def teardown_method(self):
        """Drop handlers bound to the captured stderr of the finished test."""
        set_settings(None)
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    def test_main_runs_all_demos(self, capsys):
        """Test the default invocation prints every demonstration."""
        assert main.main([]) == 0

        output = capsys.readouterr().out
        assert "20 -> 10 -> 30 -> 40" in output
        assert "[5, 11, 12, 22, 25, 34, 64, 90]" in output
        assert "First occurrence of 5 at index 1" in output

    def test_main_single_demo(self, capsys):
        """Test selecting one demonstration."""
        assert main.main(['--demo', 'quick-sort']) == 0

        output = capsys.readouterr().out
        assert "Quick sort demonstration" in output
        assert "Linked list demonstration" not in output

    def test_main_sort(self, capsys):
        """Test sorting values from the command line."""
        assert main.main(['--sort', '3,1,2']) == 0
        assert capsys.readouterr().out.strip() == "[1, 2, 3]"

    def test_main_search(self, capsys):
        """Test searching values from the command line."""
        assert main.main(['--search', '5', '--values', '2,5,5,9', '--mode', 'first']) == 0
        assert "found at index 1" in capsys.readouterr().out

    def test_main_search_not_found(self, capsys):
        """Test a missing target is still a successful run."""
        assert main.main(['--search', '4', '--values', '1,2,3']) == 0
        assert "Element 4 not found" in capsys.readouterr().out

    def test_main_bad_values_is_usage_error(self, capsys):
        """Test malformed values are rejected by the argument parser."""
        with pytest.raises(SystemExit) as exc_info:
            main.main(['--sort', '3,x'])

        assert exc_info.value.code == 2
        assert "Invalid integer 'x'" in capsys.readouterr().err

    def test_main_sort_and_search_exclusive(self, capsys):
        """Test --sort and --search cannot be combined."""
        with pytest.raises(SystemExit) as exc_info:
            main.main(['--sort', '3,1', '--search', '1', '--values', '1,3'])

        assert exc_info.value.code == 2
        assert "not allowed with argument" in capsys.readouterr().err

    def test_main_search_requires_values(self):
        """Test --search without --values is a usage error."""
        with pytest.raises(SystemExit):
            main.main(['--search', '1'])

    def test_main_rejects_unsorted_demo_data(self, monkeypatch, capsys):
        """Test unsorted search demonstration data exits with an error code."""
        monkeypatch.setenv('DEMO_SEARCH_VALUES', '9,1,5')

        assert main.main(['--demo', 'binary-search']) == 1
        assert "Binary search demonstration" not in capsys.readouterr().out
