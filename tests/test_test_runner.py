"""
Unit tests for the test runner's discovery and per-module summary.
"""

import unittest
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import test_runner

class _SampleTests(unittest.TestCase):

    def test_passes(self):
        pass

    def test_fails(self):
        self.fail("expected")

class TestTestRunner(unittest.TestCase):

    def test_discovers_modules_from_test_files(self):
        """The module list mirrors tests/test_*.py."""
        modules = test_runner.discover_test_modules()
        for name in ["vector_math", "catalog", "ranking_engine", "utils", "main_app"]:
            self.assertIn(name, modules)
        self.assertEqual(modules, sorted(modules))

    def test_summarize_by_module(self):
        suite = unittest.TestSuite([
            _SampleTests("test_passes"),
            _SampleTests("test_fails")
        ])
        result = unittest.TestResult()
        suite.run(result)

        module = _SampleTests.__module__.split('.')[0]
        summary = test_runner.summarize_by_module(suite, result)
        self.assertEqual(summary, {module: [2, 1]})

    def test_unknown_module_rejected(self):
        self.assertFalse(test_runner.run_specific_module("no_such_module"))

if __name__ == '__main__':
    unittest.main()
