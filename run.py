"""mazegen CLI entry point.

Provides subcommands for running the maze API server and for printing a
generated maze to the terminal. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    mazegen maze engine

    Run the JSON API server, or generate a maze and print it to the terminal.
    Configuration can be provided via CLI flags or environment variables. If
    both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                 Bind address for the web server (default: 0.0.0.0)
          PORT                 Port for the web server (default: 5000)
          MAZE_DEFAULT_WIDTH   Default maze width (default: 7)
          MAZE_DEFAULT_HEIGHT  Default maze height (default: 5)
          MAZE_DEFAULT_ROOMS   Default room count (default: 2)
          MAZE_DEFAULT_BIAS    Default directional bias (default: none)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a 20x10 maze with a strong horizontal bias
          python run.py render --width 20 --height 10 --bias very_horizontal --seed 7

          # Also draw the shortest path from the start to the exit
          python run.py render --seed 7 --path
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mazegen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    render_parser = subparsers.add_parser(
        "render",
        help="Generate a maze and print it as ASCII",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    render_parser.add_argument("--width", type=int, default=None, help="Maze width in tiles (3-100)")
    render_parser.add_argument("--height", type=int, default=None, help="Maze height in tiles (3-100)")
    render_parser.add_argument("--rooms", type=int, default=None, help="Number of fully-open rooms")
    render_parser.add_argument(
        "--bias",
        default=None,
        choices=["none", "horizontal", "very_horizontal", "vertical", "very_vertical"],
        help="Directional bias of passages",
    )
    render_parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    render_parser.add_argument("--path", action="store_true", help="Mark the shortest path from start to exit")
    render_parser.set_defaults(command="render")

    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _render(args) -> int:
    from mazegen.maze import generate
    from mazegen.maze.render import render_ascii

    try:
        maze = generate(
            seed=args.seed,
            width=args.width if args.width is not None else int(os.getenv("MAZE_DEFAULT_WIDTH", "7")),
            height=args.height if args.height is not None else int(os.getenv("MAZE_DEFAULT_HEIGHT", "5")),
            rooms=args.rooms if args.rooms is not None else int(os.getenv("MAZE_DEFAULT_ROOMS", "2")),
            bias=args.bias or os.getenv("MAZE_DEFAULT_BIAS", "none"),
        )
    except ValueError as e:
        prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
        print(f"{prefix} {e}", file=sys.stderr)
        return 2
    path = maze.path_to_exit(maze.start) if args.path else ()
    print(render_ascii(maze.grid, start=maze.start, exit=maze.exit, path=path))
    print(
        f"seed={maze.seed} size={maze.width}x{maze.height} rooms={len(maze.rooms)} "
        f"start={maze.start} exit={maze.exit} distance={maze.distance_to_exit(maze.start)}"
    )
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "render":
        return _render(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from mazegen.logging_utils import log
    from mazegen.server import start_server

    title = f"{Fore.CYAN}{Style.BRIGHT}mazegen API Server{Style.RESET_ALL}" if _COLOR_ENABLED else "mazegen API Server"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
