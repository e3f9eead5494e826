from __future__ import annotations

"""
TiveSender, a mock Tive webhook sender for exercising telemetry ingestion APIs.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""TiveSender CLI."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from ..config import SenderSettings, load_settings
from ..errors import TiveSenderError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import CredentialStatus, DispatchResult, ProbeResult
from ..payloads import format_payload, get_invalid_payloads, get_sample, get_sample_payloads, synthesize
from ..runtime import TiveSender


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mock Tive sender: generate and send test payloads to a webhook API")
    parser.add_argument("--url", help="Webhook URL (overrides the saved one)")
    parser.add_argument("--api-key", help="API key sent as a Bearer token (overrides the saved one)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for local/self-signed endpoints)",
    )
    parser.add_argument("--log-level", help="Logging level (default: TIVESENDER_LOG_LEVEL or WARNING)")

    commands = parser.add_subparsers(dest="command", required=True)

    samples = commands.add_parser("samples", help="List the bundled sample payloads")
    samples.add_argument("--invalid", action="store_true", help="List the invalid (negative test) samples instead")

    generate = commands.add_parser("generate", help="Print a randomized payload")
    source = generate.add_mutually_exclusive_group()
    source.add_argument("--template", metavar="NAME", help="Sample to use as the template")
    source.add_argument("--file", type=Path, help="JSON file to use as the template")

    commands.add_parser("check", help="Check endpoint reachability and API key validity")

    send = commands.add_parser("send", help="Send one payload")
    payload = send.add_mutually_exclusive_group(required=True)
    payload.add_argument("--sample", metavar="NAME", help="Send a bundled sample (valid or invalid) as-is")
    payload.add_argument("--file", type=Path, help="Send the JSON in this file")
    payload.add_argument("--random", action="store_true", help="Send a randomized payload")

    config = commands.add_parser("config", help="Show, save or clear the stored endpoint and API key")
    config.add_argument("action", choices=["show", "save", "clear"])
    return parser


def _mask(credential: str) -> str:
    if not credential:
        return "-"
    if len(credential) <= 8:
        return "*" * len(credential)
    return f"{credential[:4]}...{credential[-4:]}"


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True, default=str)
    sys.stdout.write("\n")


def _print_check(reachability: ProbeResult, credential: CredentialStatus) -> None:
    print(f"[TiveSender] Endpoint: {reachability.state.value} - {reachability.message}")
    print(f"[TiveSender] API key:  {credential.state.value} - {credential.message}")


def _print_dispatch(result: DispatchResult) -> None:
    label = "Success" if result.succeeded else "Failed"
    status = f" ({result.status_code})" if result.status_code is not None else ""
    print(f"[TiveSender] {label}{status} at {result.issued_at.isoformat()}")
    if result.error_message:
        print(f"Error: {result.error_message}")
    if result.response_body is not None:
        print("Response:")
        print(format_payload(result.response_body))


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc


def _named_sample(name: str, *, include_invalid: bool) -> Any:
    sample = get_sample(name, include_invalid=include_invalid)
    if sample is None:
        raise SystemExit(f"Unknown sample: {name}")
    return sample.payload


async def _run(args: argparse.Namespace, settings: SenderSettings) -> int:
    async with TiveSender(create_default_http_client(settings), settings=settings) as sender:
        if args.url is not None:
            sender.endpoint = args.url
        if args.api_key is not None:
            sender.credential = args.api_key

        if args.command == "samples":
            samples = get_invalid_payloads() if args.invalid else get_sample_payloads()
            if args.json:
                _print_json([{"name": s.name, "description": s.description} for s in samples])
            else:
                for sample in samples:
                    print(f"- {sample.name}: {sample.description}")
            return 0

        if args.command == "generate":
            if args.template:
                print(format_payload(synthesize(_named_sample(args.template, include_invalid=False))))
            else:
                text = _read_template(args.file) if args.file else ""
                print(sender.generate(text))
            return 0

        if args.command == "check":
            reachability, credential = await sender.check()
            if args.json:
                _print_json({"reachability": reachability.to_dict(), "credential": credential.to_dict()})
            else:
                _print_check(reachability, credential)
            return 0

        if args.command == "send":
            if args.sample:
                record_text = json.dumps(_named_sample(args.sample, include_invalid=True))
            elif args.file:
                record_text = _read_template(args.file)
            else:
                record_text = sender.generate()
            result = await sender.send(record_text)
            if args.json:
                _print_json(result)
            else:
                _print_dispatch(result)
            return 0 if result.succeeded else 1

        if args.action == "save":
            sender.save_config()
        elif args.action == "clear":
            sender.clear_config()
        if args.json:
            _print_json({"api_url": sender.endpoint, "api_key": _mask(sender.credential)})
        else:
            print(f"API URL: {sender.endpoint or '-'}")
            print(f"API Key: {_mask(sender.credential)}")
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: SenderSettings = load_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        return asyncio.run(_run(args, settings))
    except TiveSenderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
