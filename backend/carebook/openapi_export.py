"""
CareBook Backend — Static OpenAPI Export
==========================================

What:  Writes the generated OpenAPI document to a file.
Why:   Client generators and API gateways want the contract as a static
       artifact, without starting the server.
How:   Builds the app with create_app() and dumps its OpenAPI 3.0.3
       document (see carebook.docs) as indented JSON.

Usage:
    python -m carebook.openapi_export                 # → ./openapi.json
    python -m carebook.openapi_export -o docs/api.json
    carebook-openapi --server-url https://api.example.com
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from carebook.config import Settings
from carebook.main import create_app

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "openapi.json"


def build_openapi(server_url: str = "") -> Dict[str, Any]:
    """OpenAPI document of a freshly created app, no server needed."""
    app_settings = Settings(public_server_url=server_url) if server_url else Settings()
    return create_app(app_settings).openapi()


def write_openapi(output: Path, server_url: str = "") -> Path:
    document = build_openapi(server_url)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    logger.info("OpenAPI document written to %s", output.resolve())
    return output


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="carebook-openapi",
        description="Export the CareBook OpenAPI document as JSON.",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help=f"Destination file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--server-url",
        default="",
        help="Public server URL to list ahead of the local development server",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = parse_args(argv)
    write_openapi(Path(args.output), server_url=args.server_url)


if __name__ == "__main__":
    main()
