"""Unit tests for GuidanceService (rule registry loading)."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from solid_base_linter.domain.rules.solid_base import SolidBaseRule
from solid_base_linter.infrastructure.services.guidance_service import GuidanceService


class TestGuidanceServicePackagedRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self.service = GuidanceService()

    def test_every_rule_code_has_an_entry(self) -> None:
        for code in SolidBaseRule.CODES:
            with self.subTest(code=code):
                self.assertEqual(self.service.get_entry(code)["rule_id"], f"solidbase.{code}")

    def test_lookup_by_symbol(self) -> None:
        entry = self.service.get_entry("inherited-layout-conflict")
        self.assertIsNotNone(entry)
        self.assertEqual(entry["rule_id"], "solidbase.W9802")

    def test_unknown_rule_has_no_entry(self) -> None:
        self.assertIsNone(self.service.get_entry("E0000"))

    def test_cycle_rule_is_internal_error(self) -> None:
        self.assertTrue(self.service.get_entry("E9803").get("internal_error"))

    def test_manual_instructions(self) -> None:
        self.assertIn("__slots__", self.service.get_manual_instructions("E9801"))
        self.assertIn("Protocols", self.service.get_manual_instructions("ineligible-solid-base-marker"))

    def test_manual_instructions_fall_back_to_default(self) -> None:
        self.assertIn("at most one chain", self.service.get_manual_instructions("E0000"))

    def test_display_name(self) -> None:
        self.assertEqual(self.service.get_display_name("W9804"), "Ineligible solid base marker")
        self.assertEqual(self.service.get_display_name("some-rule"), "Some rule")


class TestGuidanceServiceCustomRegistry(unittest.TestCase):
    def test_missing_file_gives_empty_registry(self) -> None:
        service = GuidanceService("/nonexistent/rule_registry.yaml")
        self.assertIsNone(service.get_entry("E9801"))
        self.assertIn("See project docs", service.get_manual_instructions("E9801"))

    def test_display_name_falls_back_to_rule_symbol(self) -> None:
        service = GuidanceService("/nonexistent/rule_registry.yaml")
        self.assertEqual(service.get_display_name("E9801"), "Instance layout conflict")

    def test_non_mapping_yaml_gives_empty_registry(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "registry.yaml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            self.assertIsNone(GuidanceService(str(path)).get_entry("E9801"))

    def test_short_description_used_without_display_name(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "registry.yaml"
            path.write_text(
                "solidbase.W9802:\n  short_description: Bad base\n", encoding="utf-8"
            )
            self.assertEqual(GuidanceService(str(path)).get_display_name("W9802"), "Bad base")
