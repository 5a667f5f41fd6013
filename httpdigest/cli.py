"""Command-line tools for computing and checking Digest credentials.

Examples:
    httpdigest ha1 Mufasa testrealm@host.com "Circle Of Life"
    httpdigest userhash --algorithm SHA-512-256 "Jäsøn Doe" api@example.org
    httpdigest response 'Digest username="Mufasa", ...' --password "Circle Of Life"
    httpdigest validate 'Digest username="Mufasa", ...' --ha1 939e7578ed9e3c518a452acee763bce9
    httpdigest inspect 'Digest username="Mufasa", ...'
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from rich.panel import Panel
from rich.table import Table

from ._exceptions import GenerationError, ParseError
from ._generate import (
    generate_digest_using_password,
    generate_simple_hashed_a1,
    generate_userhash,
)
from ._models import DigestValue, HashAlgorithm
from ._scheme import parse_authorization, split_scheme
from ._parser import parse
from ._types import DigestConfig
from ._utils import SCHEME, configure_logging, console
from ._validate import (
    validate_digest_using_hashed_a1,
    validate_digest_using_password,
    validate_digest_using_userhash_and_password,
    validate_userhash,
)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _parse_credential(value: str) -> DigestValue:
    scheme, _ = split_scheme(value)
    if scheme.lower() == SCHEME.lower():
        return parse_authorization(value)
    return parse(value)


def _algorithm(value: str) -> HashAlgorithm:
    try:
        return HashAlgorithm.from_token(value)
    except ValueError:
        choices = ", ".join(algorithm.value for algorithm in HashAlgorithm)
        raise argparse.ArgumentTypeError(f"unknown algorithm {value!r} (choose from {choices})") from None


def _build_parser(config: DigestConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpdigest",
        description="Compute and validate HTTP Digest authentication values",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Shortcut for --log-level=DEBUG",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    ha1 = commands.add_parser("ha1", help="Print the htdigest-style H(username:realm:password)")
    ha1.add_argument("--algorithm", type=_algorithm, default=config.default_algorithm)
    ha1.add_argument("username")
    ha1.add_argument("realm")
    ha1.add_argument("password")

    userhash = commands.add_parser("userhash", help="Print the RFC 7616 userhash")
    userhash.add_argument("--algorithm", type=_algorithm, default=config.default_algorithm)
    userhash.add_argument("username")
    userhash.add_argument("realm")

    for name, help_text in (
        ("response", "Print the response digest for a credential"),
        ("validate", "Check a credential's response (exit status 1 if invalid)"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("credential", help="Header value, with or without the Digest scheme")
        command.add_argument("--method", default="GET", help="HTTP request method")
        command.add_argument("--body", default="", help="Entity body (auth-int)")
        if name == "response":
            command.add_argument("--password", required=True, help="Plain text password")
        else:
            secret = command.add_mutually_exclusive_group(required=True)
            secret.add_argument("--password", help="Plain text password")
            secret.add_argument("--ha1", help="Hexadecimal H(A1)")
            command.add_argument(
                "--username",
                help="Real username, required when the credential carries a userhash",
            )

    inspect = commands.add_parser("inspect", help="Show the parsed fields of a credential")
    inspect.add_argument("credential", help="Header value, with or without the Digest scheme")

    return parser


def _render(digest: DigestValue) -> Table:
    table = Table(title="Digest credential", show_header=True, header_style="bold")
    table.add_column("Parameter")
    table.add_column("Value")
    table.add_row("username", str(digest.username))
    table.add_row("realm", digest.realm)
    table.add_row("nonce", digest.nonce)
    table.add_row("nc", digest.nc or "-")
    table.add_row("response", digest.response)
    table.add_row("uri", digest.request_uri)
    table.add_row("algorithm", digest.algorithm.value)
    table.add_row("qop", digest.qop.value if digest.qop else "-")
    table.add_row("cnonce", digest.client_nonce or "-")
    table.add_row("opaque", digest.opaque or "-")
    table.add_row("charset", digest.charset.value if digest.charset else "-")
    table.add_row("userhash", "true" if digest.userhash else "false")
    return table


def _validate(args: argparse.Namespace, digest: DigestValue) -> bool:
    if digest.userhash:
        if args.ha1 is not None:
            return validate_userhash(digest, args.username) and validate_digest_using_hashed_a1(
                digest, args.method, args.body, args.ha1
            )
        return validate_digest_using_userhash_and_password(
            digest, args.method, args.body, args.username, args.password
        )
    if args.ha1 is not None:
        return validate_digest_using_hashed_a1(digest, args.method, args.body, args.ha1)
    return validate_digest_using_password(digest, args.method, args.body, args.password)


def run(args: argparse.Namespace) -> int:
    if args.command == "ha1":
        console.print(
            generate_simple_hashed_a1(args.algorithm, args.username, args.realm, args.password)
        )
        return EXIT_OK

    if args.command == "userhash":
        console.print(generate_userhash(args.algorithm, args.username, args.realm))
        return EXIT_OK

    digest = _parse_credential(args.credential)

    if args.command == "inspect":
        console.print(_render(digest))
        return EXIT_OK

    if args.command == "response":
        console.print(generate_digest_using_password(digest, args.method, args.body, args.password))
        return EXIT_OK

    if digest.userhash and args.username is None:
        logging.error("A userhash credential needs --username")
        return EXIT_ERROR

    if _validate(args, digest):
        console.print(Panel("Credential is valid", border_style="green"))
        return EXIT_OK
    console.print(Panel("Credential is NOT valid", border_style="red"))
    return EXIT_INVALID


def main(argv: Optional[list[str]] = None, config: Optional[DigestConfig] = None) -> int:
    if config is None:
        config = DigestConfig()
    parser = _build_parser(config)
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.debug)
    try:
        return run(args)
    except ParseError as exc:
        logging.error(f"Cannot parse credential: {exc}")
        return EXIT_ERROR
    except GenerationError as exc:
        logging.error(f"Cannot compute response: {exc}")
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
