"""Command-line interface for dts-lint."""
import sys
from pathlib import Path

import click

from dts_lint.__version__ import __version__
from dts_lint.logging_config import get_logger, setup_logging
from dts_lint.orchestrator import lint_package
from dts_lint.reporter import FORMATTERS, get_exit_code
from dts_lint.validation import validate_local_override, validate_project_root
from dts_lint.versions import LATEST, LOWEST_SUPPORTED_VERSION


@click.command()
@click.version_option(version=__version__, prog_name="dts-lint")
@click.argument("directory", type=click.Path(file_okay=False), default=".")
@click.option(
    "--min-version",
    default=LOWEST_SUPPORTED_VERSION,
    show_default=True,
    help="Oldest TypeScript version the declarations support",
)
@click.option("--only-test-ts-next", is_flag=True, help="Only test the latest TypeScript")
@click.option("--expect-only", is_flag=True, help="Only run the 'expect' rule")
@click.option(
    "--local-ts",
    type=click.Path(file_okay=False),
    help="Only test a local TypeScript build in this directory",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default="stylish",
    show_default=True,
    help="Output format for rule failures",
)
@click.option("--progress/--no-progress", default=False, help="Show a progress bar")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
def main(
    directory: str,
    min_version: str,
    only_test_ts_next: bool,
    expect_only: bool,
    local_ts: str | None,
    output_format: str,
    progress: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """dts-lint: lint TypeScript declarations against a range of compiler versions."""
    setup_logging(verbose=verbose, quiet=quiet)
    logger = get_logger(__name__)

    if only_test_ts_next and local_ts:
        click.echo("Error: --only-test-ts-next and --local-ts cannot be combined", err=True)
        sys.exit(2)

    try:
        project_root = Path(directory)
        validate_project_root(project_root)
        validate_local_override(local_ts, min_version, LATEST)

        report = lint_package(
            project_root,
            min_version,
            only_test_ts_next=only_test_ts_next,
            expect_only=expect_only,
            ts_local=local_ts,
            formatter=output_format,
            show_progress=progress,
        )

        if report:
            click.echo(report)
        else:
            logger.info(f"No lint failures in {project_root}")

        sys.exit(get_exit_code(report))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, FileNotFoundError) as e:
        # Bad versions, configuration or project layout
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
