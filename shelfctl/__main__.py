"""
Entry point for the `shelfctl` command-line interface.

shelfctl installs, uninstalls, starts and stops Topshelf windows services
by running their executables.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the shelfctl CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
