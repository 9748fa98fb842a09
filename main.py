"""
indexedRAG - Main Entry Point

Used to run different modes from command line.
"""

import sys
import argparse

from loguru import logger
from indexedrag.utils import get_settings, get_db_path, setup_logger
from indexedrag.storage import Database
from indexedrag.session import ChatSession
from indexedrag.error_handler import IndexedragError, get_failure_log


def launch_gui(args):
    """Launch GUI application"""
    try:
        from indexedrag.gui import main as gui_main
    except ImportError as e:
        logger.error(f"Failed to import GUI: {e}")
        print("❌ GUI dependencies not installed.")
        print("💡 Run: pip install customtkinter")
        sys.exit(1)

    gui_main(log_level=getattr(args, 'log_level', None))


def open_database() -> Database:
    settings = get_settings()
    return Database(get_db_path(settings))


def cmd_info(args):
    """
    Show database location, settings and conversation size

    Usage:
        python main.py info
    """
    database = open_database()
    settings = database.load_or_create_default_settings()
    conversation = database.load_or_create_default_conversation()

    print("\n📊 indexedRAG Information:")
    print("=" * 60)
    print(f"Database Path: {database.db_path}")
    print(f"Index Interval: {settings.index_interval_minutes} minutes")
    print(f"Root Paths ({len(settings.root_paths)}):")
    for path in settings.root_paths:
        print(f"  • {path}")
    print(f"Messages: {len(conversation.messages)}")
    print("=" * 60)


def cmd_reset_conversation(args):
    """
    Replace the stored conversation with the welcome message

    Usage:
        python main.py reset-conversation
    """
    session = ChatSession(open_database())
    session.reset()
    print("🗑️  Conversation reset")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="indexedRAG - Desktop chat front-end",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                        # Launch GUI
  python main.py gui                    # Launch GUI
  python main.py info                   # Show database path and settings
  python main.py reset-conversation     # Start the conversation over
        """
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Override the configured log level (DEBUG, INFO, WARNING, ...)'
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # gui command (default)
    parser_gui = subparsers.add_parser('gui', help='Launch GUI application (default)')
    parser_gui.set_defaults(func=launch_gui)

    # info command
    parser_info = subparsers.add_parser('info', help='Show database path and settings')
    parser_info.set_defaults(func=cmd_info)

    # reset-conversation command
    parser_reset = subparsers.add_parser('reset-conversation', help='Reset the stored conversation')
    parser_reset.set_defaults(func=cmd_reset_conversation)

    return parser


def main(argv=None):
    """Main function - CLI parser"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, launch GUI by default
    if not args.command:
        logger.info("No command specified, launching GUI...")
        launch_gui(args)
        return

    if args.command == 'gui':
        args.func(args)
        return

    # Setup logger
    settings = get_settings()
    setup_logger(args.log_level or settings.log_level, settings.log_dir)

    try:
        args.func(args)
    except IndexedragError as e:
        get_failure_log().report_fatal(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
