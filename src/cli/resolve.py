"""CLI entry point for resolving this node's member id in a redundant group."""

import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import List, Optional

from hamember.utils.logger import logger
from hamember.core.configuration import load_config
from hamember.core.errors import HAMemberError
from hamember.core.keys import KeyScheme
from hamember.core.resolver import IdentityResolver
from hamember.utils.network import address_arg, parse_address


def build_parser() -> ArgumentParser:
    # Get default values from settings
    from hamember.config import get_settings

    settings = get_settings().resolver

    ap = ArgumentParser(description="Resolve the member id of this node")
    ap.add_argument(
        "-c",
        "--config",
        type=str,
        default=settings.config_file,
        required=not settings.config_file,
        help="Group configuration file (properties, JSON or XML)",
    )
    ap.add_argument(
        "-b",
        "--bind",
        type=address_arg,
        default=None,
        help="Local bind address host:port (default: any address of this host)",
    )
    ap.add_argument(
        "--prefix",
        type=str,
        default=settings.key_prefix,
        help=f"Configuration key prefix (default: {settings.key_prefix})",
    )
    ap.add_argument(
        "-a",
        "--address",
        type=address_arg,
        default=None,
        help="Resolve the member configured for this host:port instead of the local node",
    )
    ap.add_argument(
        "-k",
        "--extra-key",
        action="append",
        default=list(settings.extra_key_families),
        dest="extra_keys",
        help="Additional address key family to search with --address (repeatable)",
    )
    ap.add_argument(
        "--all-families",
        action="store_true",
        help="Also search <prefix>.service-rpc-address and <prefix>.admin-address",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    from hamember.config import get_settings

    args = build_parser().parse_args(argv)

    scheme = KeyScheme(args.prefix)
    extra_keys = list(args.extra_keys)
    if args.all_families:
        extra_keys += [k for k in scheme.extra_address_keys if k not in extra_keys]

    resolver = IdentityResolver(scheme)
    try:
        bind = args.bind
        if bind is None and get_settings().resolver.bind_address:
            bind = parse_address(get_settings().resolver.bind_address)
        config = load_config(Path(args.config))
        if args.address is not None:
            member_id = resolver.resolve_member_id_for_address(
                config, args.address, extra_keys
            )
        else:
            member_id = resolver.resolve_local_member_id(config, bind)
    except (HAMemberError, ValueError, OSError) as e:
        logger.error("Member id resolution failed: %s", e)
        return 2

    if member_id is None:
        logger.info("No member id resolved (standalone or no matching address)")
        return 0

    print(member_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
