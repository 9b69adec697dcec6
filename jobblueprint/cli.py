"""
Command line interface for the job blueprint generator.

Two subcommands are exposed:

* ``serve`` runs the Flask operator page.
* ``generate`` requests one blueprint, prints a plain-text summary and
  optionally writes the HTML table and/or the ``.docx`` document.

Errors from the generation stage are printed to stderr and turn into a
non-zero exit status.  A malformed model answer also prints the raw
upstream text so prompt drift can be diagnosed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .config import load_settings
from .errors import BlueprintError, MalformedJsonError
from .export import save_document
from .generate import get_default_provider, request_blueprint
from .render import render
from .schema import SECTIONS
from .state import BlueprintState

logger = logging.getLogger("jobblueprint.cli")


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the web surface until interrupted."""
    from .web import create_app

    app = create_app(args.settings)
    logger.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a blueprint and write the requested outputs."""
    job_title = args.title.strip()
    if not job_title:
        print("Please enter a job title.", file=sys.stderr)
        return 2
    state = BlueprintState()
    try:
        provider = get_default_provider(args.settings)
        state.replace(request_blueprint(job_title, provider=provider, generation=args.settings.generation))
    except BlueprintError as exc:
        print(f"Error generating blueprint: {exc}", file=sys.stderr)
        if isinstance(exc, MalformedJsonError):
            print("API Response:", file=sys.stderr)
            print(exc.raw_text, file=sys.stderr)
        return 1
    blueprint = state.require()
    print(blueprint.job_title)
    for _, attr, label in SECTIONS:
        print(f"\n{label}:")
        for item in getattr(blueprint, attr):
            print(f"  - {item}")
    if args.html:
        with open(args.html, "w", encoding="utf-8") as f:
            f.write(render(blueprint))
        logger.info("Wrote HTML table to %s", args.html)
    if args.docx_dir:
        save_document(blueprint, args.docx_dir)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jobblueprint", description="Job blueprint generator")
    parser.add_argument("--config", help="YAML config file (defaults to $BLUEPRINT_CONFIG)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_cmd = subparsers.add_parser("serve", help="Run the web interface")
    serve_cmd.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve_cmd.add_argument("--port", type=int, default=5000, help="Port to listen on")
    serve_cmd.add_argument("--debug", action="store_true", help="Enable the Flask debugger")
    serve_cmd.set_defaults(func=cmd_serve)

    # Generate
    gen_cmd = subparsers.add_parser("generate", help="Generate a blueprint for one job title")
    gen_cmd.add_argument("title", help="Job title, e.g. 'Data Analyst'")
    gen_cmd.add_argument("--html", help="Write the rendered HTML table to this path")
    gen_cmd.add_argument("--docx-dir", dest="docx_dir", help="Write '<title> Blueprint.docx' into this directory")
    gen_cmd.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)
    try:
        args.settings = load_settings(args.config)
    except BlueprintError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    level = logging.DEBUG if args.verbose else getattr(logging, args.settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
