"""
Command line tool that reads a repository.

Usage:
    DOCKER_USERNAME=me DOCKER_PASSWORD=secret dockerhub-get-repository --name library/ubuntu
"""

import argparse
import logging
import sys

from dockerhub.client import DockerHubClient
from dockerhub.exceptions import DockerHubError
from dockerhub.logging import configure_logging, get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockerhub-get-repository",
        description="Print a Docker Hub repository.",
    )
    parser.add_argument("--name", default="", help="Name of the repository (namespace/name).")
    parser.add_argument("--debug", action="store_true", help="Log HTTP requests and responses.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.name:
        parser.print_help(sys.stderr)
        return 1

    if args.debug:
        configure_logging(level=logging.DEBUG)

    try:
        with DockerHubClient.from_env() as client:
            repository = client.repositories.get(args.name)
    except DockerHubError as e:
        logger.debug("get repository %s failed", args.name, exc_info=True)
        print(e, file=sys.stderr)
        return 1

    print(repository)
    return 0


if __name__ == "__main__":
    sys.exit(main())
