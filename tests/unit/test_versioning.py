"""Tests for content version comparison."""

from app.services.update import compare_versions, is_newer


class TestCompare:
    def test_equal(self):
        assert compare_versions("2024.12.15.0", "2024.12.15.0") == 0

    def test_numeric_not_lexical(self):
        assert compare_versions("2024.12.9.0", "2024.12.10.0") == -1
        assert compare_versions("2024.2.1.0", "2024.10.1.0") == -1

    def test_first_difference_decides(self):
        assert compare_versions("2025.1.1.0", "2024.12.31.9") == 1

    def test_missing_components_are_zero(self):
        assert compare_versions("2024.12.15", "2024.12.15.0") == 0


class TestIsNewer:
    def test_later_day(self):
        assert is_newer("2024.12.01.0", "2024.12.15.0") is True

    def test_patch_differs(self):
        assert is_newer("2024.12.15.1", "2024.12.15.0") is True

    def test_same_version(self):
        assert is_newer("2024.12.15.0", "2024.12.15.0") is False


class TestNonAsciiDigits:
    def test_superscript_is_not_numeric(self):
        assert compare_versions("2024.12.15.²", "2024.12.15.0") == 1

    def test_is_newer_does_not_raise(self):
        assert is_newer("2024.12.15.0", "2024.12.15.²") is True
