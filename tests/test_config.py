"""Tests for microbench.config — harness configuration."""

from __future__ import annotations

import unittest

from microbench.config import HarnessConfig, is_valid_iteration_count, validate_config


class TestHarnessConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = HarnessConfig()
        self.assertEqual(config.iterations, 5)
        self.assertEqual(config.warmup, 1)
        self.assertTrue(config.collect_garbage)
        self.assertTrue(config.trace_memory)


class TestIsValidIterationCount(unittest.TestCase):
    def test_positive(self) -> None:
        self.assertTrue(is_valid_iteration_count(1))
        self.assertTrue(is_valid_iteration_count(100))

    def test_zero_and_negative(self) -> None:
        self.assertFalse(is_valid_iteration_count(0))
        self.assertFalse(is_valid_iteration_count(-3))

    def test_non_int(self) -> None:
        self.assertFalse(is_valid_iteration_count(2.0))
        self.assertFalse(is_valid_iteration_count("5"))
        self.assertFalse(is_valid_iteration_count(None))

    def test_bool_rejected(self) -> None:
        self.assertFalse(is_valid_iteration_count(True))


class TestValidateConfig(unittest.TestCase):
    def test_default_config_is_valid(self) -> None:
        self.assertEqual(validate_config(HarnessConfig()), [])

    def test_zero_iterations(self) -> None:
        errors = validate_config(HarnessConfig(iterations=0))
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].field, "iterations")
        self.assertEqual(errors[0].severity, "error")

    def test_negative_warmup(self) -> None:
        errors = validate_config(HarnessConfig(warmup=-1))
        self.assertEqual([e.field for e in errors], ["warmup"])
        self.assertEqual(errors[0].severity, "error")

    def test_zero_warmup_is_warning(self) -> None:
        errors = validate_config(HarnessConfig(warmup=0))
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].severity, "warning")

    def test_multiple_errors(self) -> None:
        errors = validate_config(HarnessConfig(iterations=-2, warmup=-1))
        self.assertEqual({e.field for e in errors}, {"iterations", "warmup"})


if __name__ == "__main__":
    unittest.main()
