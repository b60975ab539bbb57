#!/usr/bin/env python3
"""
Unit tests for argument parser utilities.
"""
import unittest
import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.arg_parser import create_client_parser, parse_non_negative_int, validate_client_args


class TestParseNonNegativeInt(unittest.TestCase):
    """Test cases for parse_non_negative_int function."""

    def test_regular_integers(self):
        self.assertEqual(parse_non_negative_int("0"), 0)
        self.assertEqual(parse_non_negative_int("42"), 42)
        self.assertEqual(parse_non_negative_int("123456789012345678901234567890"),
                         123456789012345678901234567890)

    def test_negative_numbers_raise_error(self):
        with self.assertRaises(argparse.ArgumentTypeError):
            parse_non_negative_int("-1")

    def test_invalid_strings_raise_error(self):
        for value in ["abc", "1.5", "1e3", ""]:
            with self.assertRaises(argparse.ArgumentTypeError):
                parse_non_negative_int(value)


class TestClientParser(unittest.TestCase):
    """Test cases for create_client_parser."""

    def setUp(self):
        self.parser = create_client_parser()

    def test_number_kept_as_string(self):
        args = self.parser.parse_args(["007"])
        self.assertEqual(args.number, "007")
        self.assertIsNone(args.gcd)
        self.assertEqual(args.config, "client.yaml")
        self.assertFalse(args.show_exact)

    def test_gcd_option(self):
        args = self.parser.parse_args(["--gcd", "48", "18"])
        self.assertIsNone(args.number)
        self.assertEqual(args.gcd, [48, 18])

    def test_output_flags(self):
        args = self.parser.parse_args(["100", "--show-exact", "--json", "-q", "--api", "http://x/api/v1"])
        self.assertTrue(args.show_exact)
        self.assertTrue(args.json)
        self.assertTrue(args.quiet)
        self.assertEqual(args.api, "http://x/api/v1")


class TestValidateClientArgs(unittest.TestCase):
    """Test cases for validate_client_args."""

    def setUp(self):
        self.parser = create_client_parser()

    def test_number_only(self):
        validate_client_args(self.parser.parse_args(["6"]))

    def test_gcd_only(self):
        validate_client_args(self.parser.parse_args(["--gcd", "7", "0"]))

    def test_neither(self):
        with self.assertRaises(ValueError):
            validate_client_args(self.parser.parse_args([]))

    def test_both(self):
        with self.assertRaises(ValueError):
            validate_client_args(self.parser.parse_args(["6", "--gcd", "1", "2"]))


if __name__ == '__main__':
    unittest.main()
