"""
Command-line interface for SimpleDB Python SDK
Runs single SimpleDB operations and prints their results as JSON
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional

from . import __version__
from .client import SimpleDBClient
from .config.client_config import ClientConfig
from .exceptions import ConfigurationError, ServiceError, SimpleDBSDKError


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='simpledb-cli',
        description='SimpleDB command-line interface. Credentials are read from '
                    'AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY or from --config.'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'SimpleDB Python SDK {__version__}'
    )
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('--host', help='Endpoint host (default: sdb.amazonaws.com)')
    parser.add_argument('--port', type=int, help='Endpoint port (default: 443)')
    parser.add_argument('--scheme', choices=['http', 'https'], help='URL scheme (default: https)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list-domains', help='List domains')
    list_parser.add_argument('--max', type=int, dest='max_number_of_domains', help='Page size (1-100)')
    list_parser.add_argument('--next-token', help='Token of the page to fetch')
    list_parser.add_argument('--all', action='store_true', help='Follow pagination and print every domain')

    for name, help_text in (
        ('create-domain', 'Create a domain'),
        ('delete-domain', 'Delete a domain'),
        ('domain-metadata', 'Show domain metadata'),
    ):
        domain_parser = subparsers.add_parser(name, help=help_text)
        domain_parser.add_argument('domain_name', help='Domain name')

    put_parser = subparsers.add_parser('put', help='Put attributes of an item')
    put_parser.add_argument('domain_name', help='Domain name')
    put_parser.add_argument('item_name', help='Item name')
    put_parser.add_argument(
        '-a', '--attribute',
        action='append',
        default=[],
        required=True,
        metavar='NAME=VALUE',
        help='Attribute to put (repeat for several values)'
    )
    put_parser.add_argument(
        '--replace',
        action='append',
        default=[],
        metavar='NAME',
        help='Attribute whose existing values are replaced'
    )

    get_parser = subparsers.add_parser('get', help='Get attributes of an item')
    get_parser.add_argument('domain_name', help='Domain name')
    get_parser.add_argument('item_name', help='Item name')
    get_parser.add_argument('-a', '--attribute', action='append', default=[], metavar='NAME',
                            help='Attribute to return (default: all)')

    delete_parser = subparsers.add_parser('delete', help='Delete an item or some of its attributes')
    delete_parser.add_argument('domain_name', help='Domain name')
    delete_parser.add_argument('item_name', help='Item name')
    delete_parser.add_argument('-a', '--attribute', action='append', default=[], metavar='NAME',
                               help='Attribute to delete (default: whole item)')

    select_parser = subparsers.add_parser('select', help='Run a select expression')
    select_parser.add_argument('expression', help='Select expression')
    select_parser.add_argument('--next-token', help='Token of the page to fetch')
    select_parser.add_argument('--all', action='store_true', help='Follow pagination and print every item')

    return parser


def parse_attribute_pairs(pairs: List[str]) -> Dict[str, List[str]]:
    """
    Parse ``NAME=VALUE`` arguments into an attribute map.

    Raises:
        ValueError: If an argument has no ``=``
    """
    attributes: Dict[str, List[str]] = {}
    for pair in pairs:
        if '=' not in pair:
            raise ValueError(f"Attribute must be NAME=VALUE: {pair}")
        name, value = pair.split('=', 1)
        attributes.setdefault(name, []).append(value)
    return attributes


def build_config(args) -> ClientConfig:
    """Build client configuration from a file or the environment plus flags."""
    overrides = {
        key: getattr(args, key)
        for key in ('host', 'port', 'scheme')
        if getattr(args, key) is not None
    }

    if args.config:
        config = ClientConfig.from_file(args.config)
        if overrides:
            data = config.to_dict(include_secret=True)
            data.update(overrides)
            config = ClientConfig.from_dict(data)
        return config

    return ClientConfig.from_env(**overrides)


def to_json(value: Any) -> str:
    if is_dataclass(value):
        value = asdict(value)
    return json.dumps(value, indent=2, default=str, ensure_ascii=False)


def run_command(client: SimpleDBClient, args) -> Any:
    """Run the selected command and return what should be printed."""
    if args.command == 'list-domains':
        if args.all:
            return list(client.iter_domains(args.max_number_of_domains))
        return client.list_domains(args.max_number_of_domains, args.next_token)
    elif args.command == 'create-domain':
        return client.create_domain(args.domain_name)
    elif args.command == 'delete-domain':
        return client.delete_domain(args.domain_name)
    elif args.command == 'domain-metadata':
        return client.domain_metadata(args.domain_name)
    elif args.command == 'put':
        return client.put_attributes(
            args.domain_name,
            args.item_name,
            parse_attribute_pairs(args.attribute),
            args.replace,
        )
    elif args.command == 'get':
        return client.get_attributes(args.domain_name, args.item_name, args.attribute or None)
    elif args.command == 'delete':
        return client.delete_attributes(args.domain_name, args.item_name, args.attribute or None)
    elif args.command == 'select':
        if args.all:
            return dict(client.iter_select(args.expression))
        return client.select(args.expression, args.next_token)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        with SimpleDBClient(build_config(args)) as client:
            print(to_json(run_command(client, args)))
        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except ServiceError as e:
        print(f"Service error ({e.error_code}, HTTP {e.http_status}): {e}", file=sys.stderr)
        if e.request_id:
            print(f"  Request ID: {e.request_id}", file=sys.stderr)
        return 1
    except (SimpleDBSDKError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
