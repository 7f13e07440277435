#!/usr/bin/env python3
"""Submit a creative brief and print the resulting shorts package.

By default the brief is posted to the deployed generate endpoint. With
``--local`` the brief is validated and synthesized in-process using the
credentials found in the environment (or a local ``.env`` file).
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from shorts_architect.blueprint_engine.engine import BlueprintSynthesizer
from shorts_architect.client.session import SubmissionSession, SubmissionState
from shorts_architect.client.transport import (
    BlueprintTransport,
    HttpBlueprintTransport,
    LocalBlueprintTransport,
)
from shorts_architect.config import SynthesizerConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a YouTube Shorts blueprint from a creative brief")
    parser.add_argument("--api-endpoint", help="Generate endpoint URL (defaults to SHORTS_ARCHITECT_ENDPOINT)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Synthesize in-process instead of calling the deployed endpoint",
    )
    parser.add_argument("--config", type=Path, help="Synthesizer configuration JSON/YAML for --local runs")
    parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a brief field (topic, audience, goal, duration, tone, callToAction, language)",
    )
    parser.add_argument("--brief-file", type=Path, help="JSON file with brief fields to merge over the defaults")
    parser.add_argument("--json", action="store_true", help="Print the blueprint JSON instead of the package text")
    parser.add_argument("--copy", action="store_true", help="Copy the package text to the clipboard")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    return parser.parse_args()


def main() -> None:
    load_dotenv()
    args = parse_args()

    transport = _build_transport(args)
    if transport is None:
        print("An endpoint is required; pass --api-endpoint, set SHORTS_ARCHITECT_ENDPOINT, or use --local.", file=sys.stderr)
        sys.exit(1)

    session = SubmissionSession(transport=transport)
    try:
        overrides = _build_overrides(args)
        for name, value in overrides.items():
            session.update_field(name, value)
    except (KeyError, ValueError) as exc:
        print(f"Invalid brief override: {exc}", file=sys.stderr)
        sys.exit(1)

    state = session.submit()
    if state is not SubmissionState.SUCCESS or session.blueprint is None:
        print(f"Generation failed: {session.error}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(session.blueprint.to_payload(), indent=2, ensure_ascii=False))
    else:
        print(session.package_text)

    if args.copy:
        print(session.copy_package(), file=sys.stderr)
    session.close()


def _build_transport(args: argparse.Namespace) -> Optional[BlueprintTransport]:
    if args.local:
        config = SynthesizerConfig.from_file(args.config) if args.config else SynthesizerConfig()
        return LocalBlueprintTransport(BlueprintSynthesizer(config=config))
    endpoint = args.api_endpoint or os.getenv("SHORTS_ARCHITECT_ENDPOINT")
    if not endpoint:
        return None
    return HttpBlueprintTransport(endpoint, timeout=args.timeout)


def _build_overrides(args: argparse.Namespace) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if args.brief_file:
        overrides.update(json.loads(args.brief_file.read_text(encoding="utf-8")))
    for item in args.field:
        if "=" not in item:
            raise ValueError(f"Expected NAME=VALUE, got '{item}'")
        key, value = item.split("=", 1)
        overrides[key.strip()] = value
    return overrides


if __name__ == "__main__":
    main()
