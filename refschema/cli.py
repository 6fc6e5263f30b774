#!/usr/bin/env python3
"""
Command-line interface for the JSON schema validator.
"""

import argparse
import json
import logging
import sys
import urllib.request
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .api import JsonValidator
from .exceptions import SchemaError
from .version import __version__

logger = logging.getLogger("refschema")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_SCHEMA_ERROR = 2


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate a JSON data file against a JSON schema (draft 4, 6 or 7)."
    )
    parser.add_argument(
        "data_file",
        type=str,
        help="Path to the JSON data file to validate"
    )
    parser.add_argument(
        "schema_file",
        type=str,
        help="Path to the JSON schema file"
    )
    parser.add_argument(
        "--remote-dir",
        action="append",
        metavar="URL=DIR",
        help="Serve remote schemas under URL from files in DIR (can be used multiple times)"
    )
    parser.add_argument(
        "--allow-network",
        action="store_true",
        help="Fetch remote schemas not covered by --remote-dir over the network"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def load_json(path: Union[str, Path]) -> Any:
    """
    Load a JSON document from a file.

    Args:
        path: Path to the file

    Returns:
        The decoded document
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def parse_remote_dirs(definitions: Optional[List[str]]) -> Dict[str, Path]:
    """
    Parse --remote-dir URL=DIR options.

    Args:
        definitions: Raw option values

    Returns:
        Mapping of URL prefix to local directory
    """
    remote_dirs = {}
    for definition in definitions or []:
        if "=" not in definition:
            logger.warning(f"Ignoring malformed --remote-dir value: {definition}")
            continue
        url, directory = definition.rsplit("=", 1)
        remote_dirs[url] = Path(directory)
    return remote_dirs


def make_remote_schema_resolver(remote_dirs: Dict[str, Path],
                                allow_network: bool = False) -> Optional[Callable[[str], Any]]:
    """
    Build the remote schema resolver used by the command.

    URLs under a configured prefix are read from the matching directory;
    anything else is downloaded when network access is allowed.

    Args:
        remote_dirs: Mapping of URL prefix to local directory
        allow_network: Whether other URLs may be fetched over the network

    Returns:
        A resolver, or None when no remote schema can be served
    """
    if not remote_dirs and not allow_network:
        return None

    # Longest prefix wins
    prefixes = sorted(remote_dirs, key=len, reverse=True)

    def remote_schema_resolver(url: str) -> Any:
        for prefix in prefixes:
            if url.startswith(prefix):
                path = remote_dirs[prefix] / url[len(prefix):].lstrip("/")
                logger.debug(f"Loading {url} from {path}")
                return load_json(path)

        if not allow_network:
            raise FileNotFoundError(f"No --remote-dir serves {url}")

        logger.debug(f"Downloading {url}")
        with urllib.request.urlopen(url) as response:
            return json.loads(response.read().decode("utf-8"))

    return remote_schema_resolver


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    args = parse_args(args)

    validator = JsonValidator(
        remote_schema_resolver=make_remote_schema_resolver(
            parse_remote_dirs(args.remote_dir), args.allow_network),
        decode_json=json.loads,
        verbose=args.verbose
    )

    try:
        root = validator.resolve(validator.decode(Path(args.schema_file).read_text(encoding="utf-8")))
    except (OSError, ValueError, SchemaError) as e:
        logger.error(f"Failed to load schema {args.schema_file}: {e}")
        return EXIT_SCHEMA_ERROR

    try:
        data = validator.decode(Path(args.data_file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load data {args.data_file}: {e}")
        return EXIT_INVALID

    result = validator.validate(data, root)

    # Report results
    if not result.valid:
        logger.error("Validation failed:")
        for error in result.errors:
            logger.error(f"  - {error}")
        return EXIT_INVALID

    logger.info("Validation successful!")
    return EXIT_VALID


if __name__ == "__main__":
    sys.exit(main())
