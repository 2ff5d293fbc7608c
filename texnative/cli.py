"""
Command-line interface for texnative.

Usage:
    texnative render input.html --format json --output tree.json
    texnative render input.html --format tree --platform android --width 411 --height 891
    texnative version
"""

import argparse
import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from . import __version__
from .api import TexNativeRenderer
from .config import RenderConfig
from .exceptions import TexNativeError
from .models.primitives import FlowContainer, ImageWidget, Primitive, TableWidget, TextRun, VectorGraphic
from .utils.metrics import MOBILE_HEIGHT, MOBILE_WIDTH, StaticMetricsProvider
from .utils.rich_logger import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="texnative",
        description="texnative - render HTML with typeset math into native UI primitives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  texnative render page.html --format json --output page.json
  texnative render page.html --format tree
  texnative version
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render markup to a primitive tree")
    render_parser.add_argument("input", help="Input markup file ('-' for stdin)")
    render_parser.add_argument(
        "-f", "--format",
        choices=["json", "tree"],
        default="json",
        help="Output format (default: json)"
    )
    render_parser.add_argument("-o", "--output", help="Output file path (default: stdout)")
    render_parser.add_argument("--font-size", type=float, help="Base text size")
    render_parser.add_argument("--color", help="Text colour")
    render_parser.add_argument("--width", type=float, default=MOBILE_WIDTH, help="Viewport width")
    render_parser.add_argument("--height", type=float, default=MOBILE_HEIGHT, help="Viewport height")
    render_parser.add_argument(
        "--platform",
        choices=["web", "ios", "android"],
        default="web",
        help="Host platform (default: web)"
    )
    render_parser.add_argument("--status-bar-height", type=float, help="Status bar height (android)")
    render_parser.add_argument("--no-collapse-newlines", action="store_true",
                               help="Keep newlines inside text")
    render_parser.add_argument("--keep-isolated-newlines", action="store_true",
                               help="Render text nodes that are only newlines")
    render_parser.add_argument("--no-collapse-runs", action="store_true",
                               help="Keep runs of horizontal whitespace")
    render_parser.add_argument("--no-responsive-font", action="store_true",
                               help="Disable responsive font scaling")

    subparsers.add_parser("version", help="Show version information")

    return parser


def build_config(args) -> RenderConfig:
    return RenderConfig.from_dict({
        "font_size": args.font_size,
        "color": args.color,
        "collapse_text_newlines": not args.no_collapse_newlines,
        "skip_isolated_newline": not args.keep_isolated_newlines,
        "collapse_runs": not args.no_collapse_runs,
        "responsive_font_size": not args.no_responsive_font,
    })


def build_tree(primitive: Primitive, tree: Tree) -> Tree:
    """Append a primitive and its children to a rich tree."""
    if isinstance(primitive, TextRun):
        tree.add(escape(f"text {primitive.text!r} {primitive.style}"))
    elif isinstance(primitive, FlowContainer):
        label = "scroll" if primitive.scroll_horizontal else "view"
        branch = tree.add(escape(f"{label} {primitive.style}"))
        for child in primitive.children:
            build_tree(child, branch)
    elif isinstance(primitive, ImageWidget):
        tree.add(escape(f"image {primitive.source} width={primitive.width} height={primitive.height}"))
    elif isinstance(primitive, TableWidget):
        branch = tree.add(f"table widths={primitive.widths}")
        branch.add(escape(f"head {primitive.head}"))
        for row in primitive.rows:
            branch.add(escape(f"row {row}"))
    elif isinstance(primitive, VectorGraphic):
        tree.add(f"svg ({len(primitive.xml)} chars)")
    return tree


def _read_input(source: str) -> Optional[str]:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def cmd_render(args, console: Console) -> int:
    """Handle render command."""
    markup = _read_input(args.input)
    if markup is None:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    metrics = StaticMetricsProvider(
        width=args.width,
        height=args.height,
        platform=args.platform,
        status_bar_height=args.status_bar_height,
    )
    renderer = TexNativeRenderer(config=build_config(args), metrics=metrics)
    logger.info(f"Rendering {args.input} for {args.platform} {args.width:g}x{args.height:g}")
    root = renderer.render(markup)

    if args.format == "tree":
        tree = Tree(f"[bold]{escape(args.input)}[/bold]")
        if root is not None:
            build_tree(root, tree)
        if args.output:
            buffer = io.StringIO()
            Console(file=buffer, width=120).print(tree)
            Path(args.output).write_text(buffer.getvalue(), encoding="utf-8")
        else:
            console.print(tree)
        return 0

    payload = json.dumps(root.to_dict() if root else None, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
    else:
        console.out(payload, highlight=False)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    console = Console()

    if args.command == "version":
        console.out(f"texnative {__version__}", highlight=False)
        return 0

    if args.command == "render":
        try:
            return cmd_render(args, console)
        except TexNativeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2

    parser.print_help()
    return 1
