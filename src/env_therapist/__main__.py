#!/usr/bin/env python3
"""
env-therapist: diagnose required environment variables and conflicting .env values
"""
import sys
import argparse
import os

from . import __version__
from .config_loader import load_config
from .diagnoser import EnvironmentDiagnoser
from .output import report


def build_parser():
    parser = argparse.ArgumentParser(prog="env-therapist",
        description="env-therapist: check required env vars and conflicting values across .env files")
    parser.add_argument("--config", "-c", default=None, help="path to YAML config (default: ./.envtherapist.yml if present)")
    parser.add_argument("--json", action="store_true", help="Output diagnoses in JSON format.")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours in the report")
    parser.add_argument("--version", action="store_true", help="print version")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"env-therapist {__version__}")
        sys.exit(0)

    # --------------- Load config ----------------
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to load config: {e}", file=sys.stderr)
        sys.exit(2)

    # --------------- Diagnose ----------------
    diagnoser = EnvironmentDiagnoser(os.environ, min_length=config["min_length"])
    try:
        diagnoses = diagnoser.diagnose(config["required_vars"], config["env_files"])
    except OSError as e:
        print(f"ERROR: Failed to read env file: {e}", file=sys.stderr)
        sys.exit(2)

    # JSON output
    if args.json:
        from .json_output import wrap_json_response, to_json
        print(to_json(wrap_json_response(diagnoses, config=config), pretty=True))
        sys.exit(0)

    color = not args.no_color and sys.stdout.isatty()
    print(report(diagnoses, color=color))
    print()
    # issues are reported, not signalled through the exit code
    sys.exit(0)


if __name__ == "__main__":
    main()
