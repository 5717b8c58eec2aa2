"""CLI for mdmend - repair partial Markdown streams."""

import argparse
import json
import platform
import sys
from functools import partial
from pathlib import Path
from typing import Any

from . import __version__
from .logging import configure_logging, get_logger
from .repair.normalize import normalize
from .repair.pipeline import FIXERS, repair

logger = get_logger("cli")


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_repair(args: argparse.Namespace, rt: Any) -> int:
    """Print the repaired document."""
    text = normalize(_read_input(args.file))

    if args.static:
        content, changes = text, []
    else:
        result = repair(text, rt.options)
        content, changes = result.repaired_text, result.changes

    if args.json:
        print(json.dumps({
            "content": content,
            "changed": content != text,
            "changes": changes,
        }, indent=2))
        return 0

    print(content)
    if args.changes and not args.quiet:
        print(f"changes: {', '.join(changes) or 'none'}", file=sys.stderr)
    return 0


def cmd_normalize(args: argparse.Namespace, rt: Any) -> int:
    """Print the normalized document."""
    content = normalize(_read_input(args.file))
    if args.json:
        print(json.dumps({"content": content}, indent=2))
    else:
        print(content)
    return 0


def cmd_fix(args: argparse.Namespace, rt: Any) -> int:
    """Run a single fixer by name."""
    fixer = FIXERS.get(args.name)
    if fixer is None:
        print(
            f"Error: unknown fixer '{args.name}' (choose from: {', '.join(FIXERS)})",
            file=sys.stderr,
        )
        return 2

    if args.name in ("strong", "emphasis", "delete"):
        fixer = partial(fixer, single_dollar_text_math=rt.options.single_dollar_text_math)

    text = _read_input(args.file)
    content = fixer(text)
    if args.json:
        print(json.dumps({"fixer": args.name, "changed": content != text, "content": content}, indent=2))
    else:
        print(content)
    return 0


def cmd_replay(args: argparse.Namespace, rt: Any) -> int:
    """Feed a file to a stream session chunk by chunk and print each frame."""
    text = _read_input(args.file)
    chunk_size = args.chunk_size or rt.config.stream.chunk_size
    if chunk_size < 1:
        print("Error: --chunk-size must be at least 1", file=sys.stderr)
        return 1

    session = rt.session("static" if args.static else None)
    frames = []
    for index, start in enumerate(range(0, len(text), chunk_size)):
        state = session.append(text[start:start + chunk_size])
        frames.append((index, state))
    logger.debug("replayed %d frames in chunks of %d chars", len(frames), chunk_size)

    if args.final_only:
        frames = frames[-1:]

    for index, state in frames:
        if args.json:
            print(json.dumps({"index": index, "content": state.content, "loading": state.loading}))
            continue
        if not args.quiet:
            marker = " (loading)" if state.loading else ""
            print(f"--- frame {index}{marker}")
        print(state.content)

    return 0


def cmd_render(args: argparse.Namespace, rt: Any) -> int:
    """Print HTML for the repaired document."""
    text = normalize(_read_input(args.file))
    content = text if args.static else repair(text, rt.options).repaired_text
    html = rt.parser.render(content)
    if args.json:
        print(json.dumps({"content": content, "html": html}, indent=2))
    else:
        print(html, end="")
    return 0


def _version_string() -> str:
    return (
        f"mdmend {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="mdmend", description="Repair partial Markdown from a text stream"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/mdmend.toml)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log fixer activity to stderr"
    )
    parser.add_argument(
        "--log-file", dest="log_file", type=Path, default=None,
        help="Also write log records to this file (default: logging.file)",
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # repair command
    parser_repair = subparsers.add_parser("repair", help="Normalize and repair a document")
    parser_repair.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser_repair.add_argument(
        "--static", action="store_true", help="Skip repair; the input is complete"
    )
    parser_repair.add_argument(
        "--single-dollar", dest="single_dollar", action="store_true", default=None,
        help="Treat $...$ as inline math",
    )
    parser_repair.add_argument(
        "--html", dest="fix_html", action="store_true", default=None,
        help="Also strip a trailing unclosed HTML fragment",
    )
    parser_repair.add_argument(
        "--changes", action="store_true", help="Report which fixers changed the text"
    )

    # normalize command
    parser_normalize = subparsers.add_parser("normalize", help="Normalize line endings and LaTeX delimiters")
    parser_normalize.add_argument("file", nargs="?", help="Input file (default: stdin)")

    # fix command
    parser_fix = subparsers.add_parser("fix", help="Run one fixer")
    parser_fix.add_argument("name", help=f"Fixer name ({', '.join(FIXERS)})")
    parser_fix.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser_fix.add_argument(
        "--single-dollar", dest="single_dollar", action="store_true", default=None,
        help="Treat $...$ as inline math",
    )

    # replay command
    parser_replay = subparsers.add_parser("replay", help="Replay a file as a stream")
    parser_replay.add_argument("file", help="Input file")
    parser_replay.add_argument(
        "--chunk-size", dest="chunk_size", type=int, default=None,
        help="Characters per chunk (default: stream.chunk_size)",
    )
    parser_replay.add_argument(
        "--final-only", dest="final_only", action="store_true",
        help="Print only the last frame",
    )
    parser_replay.add_argument(
        "--static", action="store_true", help="Replay in static mode"
    )
    parser_replay.add_argument(
        "--single-dollar", dest="single_dollar", action="store_true", default=None,
        help="Treat $...$ as inline math",
    )

    # render command
    parser_render = subparsers.add_parser("render", help="Repair and render to HTML")
    parser_render.add_argument("file", nargs="?", help="Input file (default: stdin)")
    parser_render.add_argument(
        "--static", action="store_true", help="Skip repair; the input is complete"
    )
    parser_render.add_argument(
        "--single-dollar", dest="single_dollar", action="store_true", default=None,
        help="Treat $...$ as inline math",
    )

    args = parser.parse_args()

    handlers = {
        "repair": cmd_repair,
        "normalize": cmd_normalize,
        "fix": cmd_fix,
        "replay": cmd_replay,
        "render": cmd_render,
    }

    handler = handlers.get(args.cmd)
    if handler:
        try:
            from .runtime import build_runtime

            rt = build_runtime(
                config_path=args.config,
                single_dollar_text_math=getattr(args, "single_dollar", None),
                fix_html=getattr(args, "fix_html", None),
            )
            configure_logging(
                verbose=args.verbose or rt.config.logging.verbose,
                quiet=args.quiet,
                log_file=args.log_file or rt.config.logging.file,
            )
            logger.debug("running %s", args.cmd)
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
