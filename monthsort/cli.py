"""
Command-line interface for monthsort.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress

from .config import Config
from .constants import COLLISION_POLICIES, PROGRAM, get_console, get_logger
from .core import ClassificationPipeline
from .errors import SourceRootError
from .history import HistoryManager
from .progress import ProgressContext


def create_parser(config: Config) -> argparse.ArgumentParser:
    """Create argument parser with dynamic defaults from config."""
    last_source = config.get_last_source()
    last_dest = config.get_last_dest()

    source_help = "Source directory containing files to organize"
    dest_help = "Archive root that receives the year/month folders"
    collision_help = ("What to do when the destination already has a file of the "
                      f"same name (default: {config.get_on_collision()})")
    version_help = f"Display the version number of {PROGRAM} and exit"

    if last_source:
        source_help += f" (default: {last_source})"
    if last_dest:
        dest_help += f" (default: {last_dest})"

    parser = argparse.ArgumentParser(
        description="File photos and other files into year/month folders by date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Dates are taken from EXIF metadata, then a YYYYMMDD run in the filename,
then the file's modification time. Files already inside a YYYY/MM folder
are left alone, so re-running over the archive is safe.

Examples:
  {PROGRAM} ~/Pictures/Inbox ~/Pictures/Archive
  {PROGRAM} --dry-run
  {PROGRAM} --on-collision suffix
        """
    )

    parser.add_argument(
        "source", nargs="?",
        help=source_help
    )
    parser.add_argument(
        "dest", nargs="?",
        help=dest_help
    )
    parser.add_argument(
        "--source", "-s", dest="source_override",
        help="Override source directory"
    )
    parser.add_argument(
        "--dest", "-d", dest="dest_override",
        help="Override destination directory"
    )
    parser.add_argument(
        "--yes", "-y", action="store_true",
        help="Auto-confirm processing for saved source/dest paths"
    )
    parser.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Preview operations without making changes"
    )
    parser.add_argument(
        "--on-collision", choices=COLLISION_POLICIES, metavar="POLICY",
        help=f"{collision_help}; one of: {', '.join(COLLISION_POLICIES)}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", "-V", action="store_true",
        help=version_help
    )

    return parser


def configure_logging(console: Console, verbose: bool) -> logging.Logger:
    """Attach a rich console handler to the program logger once."""
    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        console_handler = RichHandler(console=console, rich_tracebacks=True)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            # Only WARNING and ERROR to console unless verbose
            handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def show_processing_plan(source: Path, dest: Path, dry_run: bool, on_collision: str,
                         console: Console) -> None:
    """Display the processing plan before execution."""
    mode = "DRY RUN" if dry_run else "MOVE"

    console.print("\n[bold]Processing Plan:[/bold]")
    console.print(f"  Source:          [blue]{source}[/blue]")
    console.print(f"  Destination:     [blue]{dest}[/blue]")
    console.print(f"  Processing Mode: [cyan]{mode}[/cyan]")
    console.print(f"  On Collision:    [cyan]{on_collision}[/cyan]")
    console.print()


def confirm_processing(console: Console) -> bool:
    """Ask for confirmation when using saved configuration."""
    console.print("[yellow]Confirm processing plan with saved configuration.[/yellow]")

    try:
        response = console.input("Continue? [y/N]: ").strip().lower()
        return response in ['y', 'yes']
    except (EOFError, KeyboardInterrupt):
        console.print("\n[red]Operation cancelled[/red]")
        return False


def main(config_path: Optional[Path] = None) -> int:
    """Main entry point.

    Args:
        config_path: Optional path to config file (for testing)
    """
    config = Config(config_path=config_path)
    parser = create_parser(config)
    args = parser.parse_args()

    # Detect if running with no positional arguments (using saved config)
    using_saved_config = args.source is None and args.dest is None and \
                         args.source_override is None and args.dest_override is None

    if args.version:
        from . import __version__, __copyright__
        if args.verbose:
            print(f"{PROGRAM} version {__version__} {__copyright__}")
            print(f"Config:  {config.config_path}")
            return 0
        print(__version__)
        return 0

    source_path = (args.source_override or args.source or
                   config.get_last_source())
    dest_path = (args.dest_override or args.dest or
                 config.get_last_dest())

    if not source_path or not dest_path:
        parser.error("Source and destination directories are required")

    source = Path(source_path).expanduser().resolve()
    dest = Path(dest_path).expanduser().resolve()

    if not source.exists():
        print(f"Error: Source directory does not exist: {source}")
        return 1

    if not source.is_dir():
        print(f"Error: Source is not a directory: {source}")
        return 1

    config.update_paths(str(source), str(dest))

    on_collision = args.on_collision or config.get_on_collision()
    if args.on_collision:
        config.update_on_collision(args.on_collision)

    console = get_console()
    logger = configure_logging(console, args.verbose)

    show_processing_plan(source=source, dest=dest, dry_run=args.dry_run,
                         on_collision=on_collision, console=console)

    if using_saved_config and not args.yes:
        if not confirm_processing(console):
            return 0

    history_manager = HistoryManager(dest_path=dest, root_dir=config.program_root,
                                     dry_run=args.dry_run)
    history_manager.setup_run_logger(logger)

    pipeline = ClassificationPipeline(source=source, dest=dest, on_collision=on_collision,
                                      dry_run=args.dry_run, logger=logger)

    try:
        with Progress(console=console) as progress:
            task = progress.add_task("Organizing files...", total=None)
            pipeline.run(ProgressContext(progress, task))

        pipeline.print_summary()
        stats_manager = pipeline.stats_manager
        history_manager.log_run_summary(source, dest, stats_manager,
                                        success=not stats_manager.has_errors())

        failed = stats_manager.get_failed()
        if failed > 0:
            console.print(f"\n[green]✓ Processing completed![/green] [yellow]({failed} files could not be moved)[/yellow]")
        else:
            console.print("\n[green]✓ Processing completed successfully![/green]")
        return 0

    except SourceRootError as e:
        console.print(f"\n[red]Error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled by user[/red]")
        return 1
    except Exception as e:
        console.print(f"\n[red]Fatal error: {e}[/red]")
        return 1
    finally:
        history_manager.close_run_logger(logger)


if __name__ == "__main__":
    sys.exit(main())
