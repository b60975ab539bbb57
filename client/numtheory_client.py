#!/usr/bin/env python3
"""
Number Properties Client

Sends a number to the calculator server and prints its prime factorization,
LCM, factorial, digit sum and perfect-square status.

Usage:
    python3 numtheory_client.py 360
    python3 numtheory_client.py 100 --show-exact
    python3 numtheory_client.py --gcd 48 18
"""

import logging
import sys
from typing import List, Optional

import yaml

from config_manager import load_client_config
from lib.api_client import APIClient, APIError
from lib.arg_parser import create_client_parser, validate_client_args
from lib.user_output import UserOutput


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = create_client_parser()
    args = parser.parse_args(argv)

    try:
        validate_client_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        config = load_client_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        parser.error(f"Invalid configuration in {args.config}: {e}")

    logging.basicConfig(
        level='DEBUG' if args.verbose else config.logging.level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    endpoint = args.api or config.api.endpoint
    api_client = APIClient(
        endpoint,
        timeout=config.api.timeout,
        retry_attempts=config.api.retry_attempts,
    )
    output = UserOutput(quiet=args.quiet)

    try:
        if args.gcd is not None:
            a, b = args.gcd
            value = api_client.gcd(a, b)
            if value is None:
                output.error(f"Could not reach server at {endpoint}")
                return 1
            output.item(f"gcd({a}, {b})", value, indent=0)
            return 0

        data = api_client.analyze(args.number)
    except APIError as e:
        output.error(str(e), log=False)
        return 2

    if data is None:
        output.error(f"Could not reach server at {endpoint}")
        return 1

    if args.json:
        output.json(data)
    else:
        output.analysis(data, show_exact=args.show_exact)
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)
