"""Command line access to the NS API, for quick queries.

Example: python -m nationscripts --agent "Testlandia's script" nation Testlandia name population
"""

import argparse
import dataclasses
import logging
import shlex
import sys
import typing as t

from nationscripts import api, auth, core, exceptions

logger = logging.getLogger(__name__)


def describe(response: t.Any) -> t.Iterable[str]:
    """Yields a `field: value` line for every populated field of a response."""
    if not dataclasses.is_dataclass(response):
        yield str(response)
        return
    for field in dataclasses.fields(response):
        value = getattr(response, field.name)
        if value is not None:
            yield f"{field.name}: {value}"


def build_request(client: api.NSAPI, args: argparse.Namespace) -> t.Any:
    """Creates the request described by the parsed arguments."""
    if args.resource == "nation":
        request = client.nation(args.name)
    elif args.resource == "region":
        request = client.region(args.name)
    elif args.resource == "world":
        request = client.world()
    elif args.resource == "wa":
        request = client.wa(args.council)
    elif args.resource == "verify":
        request = client.verify(args.name, args.checksum)
    else:
        return client.useragent()
    if args.shards:
        request.shard(*args.shards)
    return request


def main(argv: t.Optional[t.Sequence[str]] = None) -> int:
    """Main function.

    If args is provided, it is passed to the argparser.
    Otherwise, first falls back on sys.argv, and then stdin.
    """
    parser = argparse.ArgumentParser(description="Queries the NS API.")
    parser.add_argument(
        "--agent", required=True, help="User agent to identify the script to NS with."
    )
    parser.add_argument("--password", help="Password of the nation, for private shards.")
    parser.add_argument("--autologin", help="Autologin of the nation, for private shards.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Logs each request made."
    )

    resources = parser.add_subparsers(dest="resource", required=True)

    nation = resources.add_parser("nation", help="Request shards of a nation.")
    nation.add_argument("name")
    nation.add_argument("shards", nargs="*")

    region = resources.add_parser("region", help="Request shards of a region.")
    region.add_argument("name")
    region.add_argument("shards", nargs="*")

    world = resources.add_parser("world", help="Request shards of the world.")
    world.add_argument("shards", nargs="*")

    wa = resources.add_parser("wa", help="Request shards of a WA council.")
    wa.add_argument("council", type=int, choices=(1, 2))
    wa.add_argument("shards", nargs="*")

    verify = resources.add_parser("verify", help="Verify a nation's checksum.")
    verify.add_argument("name")
    verify.add_argument("checksum")
    verify.add_argument("shards", nargs="*")

    resources.add_parser("useragent", help="Show the user agent NS sees.")

    # Parse args, checking argument, then sys, then stdin
    if argv:
        args = parser.parse_args(argv)
    elif len(sys.argv) > 1:
        args = parser.parse_args()
    else:
        inputString = input("Arguments (One line, -h for help): ")
        args = parser.parse_args(shlex.split(inputString))

    core.enable_logging(logging.INFO if args.verbose else logging.WARNING)

    credential = None
    if args.password or args.autologin:
        credential = auth.Credential(password=args.password, autologin=args.autologin)
    client = api.NSAPI(args.agent, credential=credential)

    try:
        response = build_request(client, args).send()
    except exceptions.APIError as error:
        logger.error("%s", error)
        return 1

    for line in describe(response):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
