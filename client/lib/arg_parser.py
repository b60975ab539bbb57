#!/usr/bin/env python3
"""
Argument parsing for the number-properties client.
"""
import argparse


def parse_non_negative_int(value: str) -> int:
    """
    Parse a non-negative integer argument.

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative integer
    """
    try:
        result = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from e
    if result < 0:
        raise argparse.ArgumentTypeError(f"Value must be non-negative: {value}")
    return result


def create_client_parser() -> argparse.ArgumentParser:
    """Create argument parser for the number-properties client."""
    parser = argparse.ArgumentParser(
        description='Compute prime factorization, factorial, digit sum and perfect-square status of a number'
    )

    # Input. Kept as a string so the server sees exactly what was typed
    parser.add_argument('number', nargs='?', help='Positive integer to analyze')
    parser.add_argument('--gcd', nargs=2, type=parse_non_negative_int, metavar=('A', 'B'),
                        help='Compute gcd(A, B) instead of analyzing a number')

    # Configuration
    parser.add_argument('--config', default='client.yaml', help='Config file path')
    parser.add_argument('--api', help='API endpoint override (e.g., http://localhost:8000/api/v1)')

    # Output
    parser.add_argument('--show-exact', action='store_true',
                        help='Also print the exact factorial when it is abbreviated')
    parser.add_argument('--json', action='store_true', help='Print the raw JSON response')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress all non-error output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    return parser


def validate_client_args(args: argparse.Namespace) -> None:
    """
    Check argument combinations argparse cannot express.

    Raises:
        ValueError: If neither or both of number and --gcd are given
    """
    if args.gcd is None and args.number is None:
        raise ValueError("Provide a number to analyze or --gcd A B")
    if args.gcd is not None and args.number is not None:
        raise ValueError("Provide either a number or --gcd, not both")
