"""
Rules loader tests.

Verifies that rules.yaml is parsed and validated into the Rules model.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules


class TestRulesLoading:
    def test_load_actual_rules_file(self, rules_path: Path) -> None:
        rules = load_rules(rules_path)
        assert rules.tax.threshold_year == 2000
        assert rules.tax.default_tax_year == 2000
        assert rules.tax.post_threshold_multiplier == 1.2
        assert rules.tax.base_multiplier == 1.3
        assert rules.demo.income == 1000
        assert rules.demo.replacement_item == "chicken"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_directory_is_not_a_rules_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path)

    def test_empty_file_gives_defaults(self, write_rules) -> None:
        rules = load_rules(write_rules(""))
        assert rules == Rules()

    def test_partial_section(self, write_rules) -> None:
        rules = load_rules(write_rules("tax:\n  threshold_year: 2010\n"))
        assert rules.tax.threshold_year == 2010
        assert rules.tax.base_multiplier == 1.3

    def test_fenced_yaml_block(self, write_rules) -> None:
        content = (
            "# Rules\n\nSome prose.\n\n"
            "```yaml\n"
            "tax:\n"
            "  base_multiplier: 1.4\n"
            "```\n\n"
            "More prose.\n"
        )
        rules = load_rules(write_rules(content, "rules.md"))
        assert rules.tax.base_multiplier == 1.4


class TestRulesValidation:
    def test_invalid_yaml(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("tax: [unclosed"))

    def test_schema_failure(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("tax:\n  threshold_year: not-a-year\n"))
