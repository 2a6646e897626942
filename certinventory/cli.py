# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Command-line interface for the certificate inventory.

Allows running:
    certinventory list --certificates certificates.json
    certinventory assign CLIENT_ID CERTIFICATE_ID --database-url sqlite:///inventory.db
"""

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import List, Optional

from .config import Settings, configure_logging, create_service
from .errors import InventoryError

# Exit status by error class
EXIT_CLIENT_ERROR = 1
EXIT_SERVER_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='certinventory',
        description='List certificates and assign them to clients',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List certificates from seed files
  certinventory --certificates certificates.json list

  # Assign a certificate to a client in a database
  certinventory --database-url sqlite:///inventory.db assign \\
      63838416-b316-418a-8cc8-9efe3411136c f0e5137f-03e1-4ca9-8dd9-b79da983d6be
        """
    )

    parser.add_argument(
        '--certificates',
        type=Path,
        help='JSON file of certificates for the in-memory store'
    )

    parser.add_argument(
        '--clients',
        type=Path,
        help='JSON file of clients for the in-memory store'
    )

    parser.add_argument(
        '--database-url',
        help='Use the database store at this URL'
    )

    parser.add_argument(
        '--log-level',
        help='Logging level (default: from settings, INFO)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('list', help='List all certificates')

    assign = subparsers.add_parser('assign', help='Assign a certificate to a client')
    assign.add_argument('client_id', type=uuid.UUID, help='Client id')
    assign.add_argument('certificate_id', type=uuid.UUID, help='Certificate id')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.certificates:
        overrides['seed_certificates_path'] = args.certificates
    if args.clients:
        overrides['seed_clients_path'] = args.clients
    if args.database_url:
        overrides['store_backend'] = 'database'
        overrides['database_url'] = args.database_url
    if args.log_level:
        overrides['log_level'] = args.log_level

    settings = Settings(**overrides)
    configure_logging(settings.log_level)

    try:
        service = create_service(settings)

        if args.command == 'list':
            output = [view.to_dict() for view in service.list_certificates()]
        else:
            output = service.assign_certificate(args.client_id, args.certificate_id).to_dict()

    except InventoryError as e:
        print(f"Error: {e.detail}", file=sys.stderr)
        return EXIT_CLIENT_ERROR if e.is_client_error else EXIT_SERVER_ERROR

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
