import sys
import argparse
import json
from typing import List, Optional

import colorama
import requests
from colorama import Fore, Style

from ytplay.bootstrap import create_container
from ytplay.core.config import ConfigError, load_settings
from ytplay.core.hostlog import setup_logging
from ytplay.extractors.ytdl.extractor import ExtractorUnavailableError
from ytplay.infra.network.http import HttpHost
from ytplay.interface.aliases import COMMAND_ALIASES
from ytplay.interface.render import RENDERERS

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ytplay", description="Resolve a video page URL into a media player playlist")
    parser.add_argument("--env-file", help="Load settings from this .env file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    probe_parser = subparsers.add_parser("probe", help="Check whether a URL would be handled")
    probe_parser.add_argument("url", help="Page URL")

    parse_parser = subparsers.add_parser("parse", help="Build the playlist for a URL")
    parse_parser.add_argument("url", help="Page URL")
    parse_parser.add_argument("--format", choices=sorted(RENDERERS), default="json", help="Output format")
    parse_parser.add_argument("-o", "--output", help="Write to file instead of stdout", default=None)

    subparsers.add_parser("config", help="Show effective settings")
    return parser

def _error(message: str) -> int:
    print(f"{Fore.RED}Error: {message}{Style.RESET_ALL}", file=sys.stderr)
    return EXIT_ERROR

def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # --- ALIAS HANDLING ---
    for i, arg in enumerate(argv):
        if i > 0 and argv[i - 1] == "--env-file":
            continue
        if not arg.startswith("-"):
            if arg.lower() in COMMAND_ALIASES:
                argv[i] = COMMAND_ALIASES[arg.lower()]
            break

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    # Windows ANSI support
    colorama.init()

    try:
        settings = load_settings(args.env_file)
    except ConfigError as e:
        return _error(str(e))

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    if args.command == "config":
        print(json.dumps(settings.as_dict(), indent=2))
        return EXIT_OK

    container = create_container(settings)
    media_service = container["media_service"]

    try:
        with HttpHost(args.url) as host:
            if args.command == "probe":
                accepted = media_service.probe(host)
                print("true" if accepted else "false")
                return EXIT_OK if accepted else EXIT_REJECTED

            items = media_service.parse(host)
    except ValueError as e:
        return _error(str(e))
    except requests.RequestException as e:
        return _error(f"Could not reach {args.url}: {e}")
    except ExtractorUnavailableError as e:
        return _error(str(e))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_ERROR

    rendered = RENDERERS[args.format](items)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered)
        print(f"{Fore.GREEN}Wrote {len(items)} item(s) to {args.output}{Style.RESET_ALL}", file=sys.stderr)
    else:
        sys.stdout.write(rendered)
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
