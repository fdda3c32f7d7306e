"""password-cli entrypoint for generating, hashing and verifying passwords."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from pydantic import ValidationError

from password_utilities.application.dto.credential_models import (
    GenerationRequest,
    VerificationRequest,
)
from password_utilities.application.services.credential_hasher_service import (
    CredentialHasherService,
    InvalidPasswordEncodingError,
    MissingRequiredValueError,
)
from password_utilities.application.services.password_generator_service import (
    InsufficientPasswordLengthError,
    InvalidPasswordLengthError,
    NegativeRequiredCountError,
    PasswordGeneratorService,
)
from password_utilities.config.settings import Settings, load_settings
from password_utilities.domain.hex_encoding import InvalidHexEncodingError
from password_utilities.infrastructure.logging import configure_logging
from password_utilities.infrastructure.security.pbkdf2_key_derivation import Pbkdf2KeyDerivation
from password_utilities.infrastructure.security.secure_random import SystemSecureRandom

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_INVALID_INPUT = 2
logger = logging.getLogger(__name__)

_INPUT_ERRORS = (
    ValidationError,
    InvalidPasswordLengthError,
    InsufficientPasswordLengthError,
    NegativeRequiredCountError,
    MissingRequiredValueError,
    InvalidPasswordEncodingError,
    InvalidHexEncodingError,
)


def build_services() -> tuple[PasswordGeneratorService, CredentialHasherService]:
    """Build generator and hasher services wired to production adapters."""

    random_source = SystemSecureRandom()
    generator = PasswordGeneratorService(random_source=random_source)
    hasher = CredentialHasherService(
        generator=generator,
        random_source=random_source,
        key_derivation=Pbkdf2KeyDerivation(),
    )
    return generator, hasher


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from settings."""

    parser = argparse.ArgumentParser(prog="password-utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name in ("generate", "generate-hashed"):
        command = subparsers.add_parser(name)
        command.add_argument("--length", type=int, default=settings.password_default_length)
        command.add_argument("--uppercase", type=int, default=1)
        command.add_argument("--lowercase", type=int, default=1)
        command.add_argument("--numeric", type=int, default=1)
        command.add_argument("--special", type=int, default=1)
        command.add_argument(
            "--special-chars",
            default=settings.password_special_characters,
        )

    hash_command = subparsers.add_parser("hash")
    hash_command.add_argument("--password", default=None)

    verify_command = subparsers.add_parser("verify")
    verify_command.add_argument("--password", default=None)
    verify_command.add_argument("--salt", required=True)
    verify_command.add_argument("--hash", required=True)
    return parser


def run(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Execute one CLI command and return the process exit code."""

    resolved_settings = settings or load_settings()
    input_stream = stdin or sys.stdin
    output_stream = stdout or sys.stdout
    error_stream = stderr or sys.stderr
    args = build_parser(resolved_settings).parse_args(argv)
    generator, hasher = build_services()

    try:
        if args.command in ("generate", "generate-hashed"):
            request = GenerationRequest(
                length=args.length,
                required_uppercase=args.uppercase,
                required_lowercase=args.lowercase,
                required_numeric=args.numeric,
                required_special_char=args.special,
                special_chars=args.special_chars,
            )
            if args.command == "generate":
                print(generator.generate_from_request(request), file=output_stream)
            else:
                record = hasher.generate_hashed_from_request(request)
                print(record.model_dump_json(), file=output_stream)
            return EXIT_OK

        password = args.password if args.password is not None else _read_password(input_stream)
        if args.command == "hash":
            record = hasher.hash_password(password)
            print(record.model_dump_json(), file=output_stream)
            return EXIT_OK

        matched = hasher.verify(
            VerificationRequest(password=password, salt=args.salt, hash=args.hash)
        )
        print(json.dumps(matched), file=output_stream)
        return EXIT_OK if matched else EXIT_MISMATCH
    except _INPUT_ERRORS as error:
        logger.warning("password_cli_invalid_input command=%s error=%s", args.command, error)
        print(f"error: {error}", file=error_stream)
        return EXIT_INVALID_INPUT


def main() -> None:
    """Run the CLI with process arguments and exit with its status code."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    sys.exit(run(settings=settings))


def _read_password(stream: TextIO) -> str | None:
    try:
        line = stream.readline()
    except UnicodeDecodeError as exc:
        raise InvalidPasswordEncodingError(field_name="password") from exc
    if not line:
        return None
    return line.rstrip("\r\n")


if __name__ == "__main__":
    main()
