# src/pkg_jwt/cli.py

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Sequence

from .application.time_expression import parse_human_time
from .domain.constants import DEFAULT_EXPIRATION_SECONDS
from .domain.exceptions import JWTError, SecretNotFoundError
from .domain.value_objects import VerifyOptions
from .tokens import sign_token, verify_token


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-jwt",
        description="Sign and verify HS256 tokens, parse human time expressions",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_time = sub.add_parser("parse-time", help="Convert e.g. '2 hours ago' to seconds")
    p_time.add_argument("expression")

    p_sign = sub.add_parser("sign", help="Sign a claim set")
    p_sign.add_argument(
        "--secret",
        help="Signing secret (defaults from env JWT_SECRET).",
    )
    p_sign.add_argument(
        "--claims",
        "-c",
        default="{}",
        help="Claims as a JSON object.",
    )
    p_sign.add_argument(
        "--expiration",
        "-e",
        default=str(DEFAULT_EXPIRATION_SECONDS),
        help="Seconds from now or a human expression like '2 hours' "
             "(default: 15 minutes).",
    )

    p_verify = sub.add_parser("verify", help="Verify a token and print its claims")
    p_verify.add_argument("token")
    p_verify.add_argument(
        "--secret",
        help="Signing secret (defaults from env JWT_SECRET).",
    )
    p_verify.add_argument("--issuer", help="Required `iss` value.")
    p_verify.add_argument(
        "--audience",
        "-A",
        nargs="*",
        help="Acceptable `aud` values (any one must match).",
    )

    return parser.parse_args(args=argv)


def _secret(args: argparse.Namespace) -> str:
    secret = args.secret or os.getenv("JWT_SECRET")
    if not secret:
        raise SecretNotFoundError("No secret given: pass --secret or set JWT_SECRET")
    return secret


def _expiration(raw: str) -> int | str:
    try:
        return int(raw)
    except ValueError:
        return raw


def _run(args: argparse.Namespace) -> dict[str, Any]:
    if args.command == "parse-time":
        return {"seconds": parse_human_time(args.expression)}

    if args.command == "sign":
        claims = json.loads(args.claims)
        if not isinstance(claims, dict):
            raise ValueError("--claims must be a JSON object")
        token = sign_token(_secret(args), claims, _expiration(args.expiration))
        return {"token": token}

    options = VerifyOptions(issuer=args.issuer, audience=args.audience)
    verified = verify_token(args.token, _secret(args), options)
    return {"header": verified.header, "payload": verified.payload}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        result = _run(args)
    except JWTError as exc:
        json.dump({"ok": False, "error": exc.key.value, "message": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1

    json.dump({"ok": True, **result}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
