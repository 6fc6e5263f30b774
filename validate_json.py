#!/usr/bin/env python3
"""
JSON Schema Validator

This script validates a JSON data file against a JSON schema (draft 4, 6 or 7),
resolving $ref references to local definitions and remote documents.

Usage:
    python validate_json.py <data_file> <schema_file> [--remote-dir URL=DIR] [--allow-network] [--verbose]
"""

import sys

from refschema.cli import main

if __name__ == "__main__":
    sys.exit(main())
