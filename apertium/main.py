#!/usr/bin/env python3
"""CLI for the Apertium translation client"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from apertium import config
from apertium.client import ApertiumClient
from apertium.exceptions import ApertiumError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from the environment."""
    api_url = config.get_api_url()
    timeout = config.get_timeout()
    from_language, to_language = config.get_default_languages()

    parser = argparse.ArgumentParser(
        prog='apertium',
        description='Translate text with an Apertium APy server'
    )
    parser.add_argument(
        '--url',
        default=api_url,
        help=f'APy base URL (default: {api_url})'
    )
    parser.add_argument(
        '--api-key',
        default=config.get_api_key(),
        help='API key (default: APERTIUM_API_KEY env var)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=timeout,
        help=f'Request timeout in seconds (default: {timeout})'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    pairs = subparsers.add_parser('pairs', help='List supported language pairs')
    direction = pairs.add_mutually_exclusive_group()
    direction.add_argument('--from', dest='from_language', help='Only list targets of this source language')
    direction.add_argument('--to', dest='to_language', help='Only list sources of this target language')

    translate = subparsers.add_parser('translate', help='Translate a text')
    translate.add_argument('text', help='Text to translate')
    translate.add_argument(
        '--from',
        dest='from_language',
        default=from_language,
        help=f'Source language (default: {from_language})'
    )
    translate.add_argument(
        '--to',
        dest='to_language',
        default=to_language,
        help=f'Target language (default: {to_language})'
    )

    check = subparsers.add_parser('check', help='Verify the server offers the default pair')
    check.add_argument('--from', dest='from_language', default=from_language)
    check.add_argument('--to', dest='to_language', default=to_language)

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the parsed command and return the exit code."""
    client_options = dict(
        base_url=args.url,
        api_key=args.api_key,
        timeout=args.timeout,
    )

    if args.command == 'check':
        with ApertiumClient(
            default_from_language=args.from_language,
            default_to_language=args.to_language,
            validate_default_pair=True,
            **client_options
        ) as client:
            logger.info("Apertium server %s is reachable.", client.base_url)
            print(f"OK: {args.from_language} -> {args.to_language} is available at {client.base_url}")
        return 0

    with ApertiumClient(**client_options) as client:
        if args.command == 'pairs':
            if args.from_language:
                languages = client.get_targets_for(args.from_language)
            elif args.to_language:
                languages = client.get_sources_for(args.to_language)
            else:
                languages = sorted(str(pair) for pair in client.get_pairs())
            for language in languages:
                print(language)
            return 0

        print(client.translate(args.text, args.from_language, args.to_language))
        return 0


def main(argv=None):
    """Main CLI entry point"""
    # Load environment variables (APERTIUM_API_URL, APERTIUM_API_KEY, ...)
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Prevent API key leakage through request URLs
    logging.getLogger('httpx').setLevel(logging.ERROR)

    try:
        sys.exit(run(args))
    except ApertiumError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == '__main__':
    main()
