"""Command-line interface for packfiles."""
import sys
import logging
from typing import Optional

import click
from .core.exceptions import PackFilesError
from .core.models import Config
from .core.pipeline import PackPipeline
from .core.summary import SummaryReporter
from .utils.console import ConsoleManager, THEMES
from .utils.file_filter import parse_extensions


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_config(root_dir: Optional[str], include: Optional[str], exclude: Optional[str],
                 structure: Optional[str], content: Optional[str], summary: Optional[str],
                 show_progress: bool) -> Config:
    """Build the run configuration; options left unset fall back to the environment."""
    overrides = {'show_progress': show_progress}
    if root_dir is not None:
        overrides['root_dir'] = root_dir
    if include is not None:
        overrides['include_extensions'] = parse_extensions(include)
    if exclude is not None:
        overrides['exclude_extensions'] = parse_extensions(exclude)
    if structure is not None:
        overrides['structure_file'] = structure
    if content is not None:
        overrides['content_file'] = content
    if summary is not None:
        overrides['summary_file'] = summary
    return Config(**overrides)


def print_options(console: ConsoleManager, config: Config) -> None:
    """Echo the effective options before the run."""
    console.print_path("Analyzing directory:", config.root_dir)
    console.print_info_with_heading("Included extensions:", ", ".join(config.include_extensions) or "(all)")
    console.print_info_with_heading("Excluded extensions:", ", ".join(config.exclude_extensions) or "(none)")
    console.print_path("Structure file:", config.structure_file)
    console.print_path("Content file:", config.content_file)
    console.print_path("Summary file:", config.summary_file)


@click.command()
@click.option('--dir', '-d', 'root_dir', help='Root directory to analyze (default: ., env INPUT_DIR)')
@click.option('--include', '-i', help='Extensions to include, comma separated; empty includes all '
                                      '(default: md,go,mbt, env INCLUDE_EXTS)')
@click.option('--exclude', '-e', help='Extensions to exclude, comma separated; always overrides include '
                                      '(default: html,css, env EXCLUDE_EXTS)')
@click.option('--structure', help='Output file for directory structure (default: directory-structure.txt)')
@click.option('--content', help='Output file for file contents (default: content.txt)')
@click.option('--summary', help='Output file for statistics summary (default: summary.txt)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.option('--no-progress', is_flag=True, help='Disable the progress bar')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='packfiles')
def main(root_dir: Optional[str], include: Optional[str], exclude: Optional[str],
         structure: Optional[str], content: Optional[str], summary: Optional[str],
         theme: str, no_progress: bool, debug: bool) -> None:
    """
    Pack a directory tree into three text reports.

    Writes a directory structure, the concatenated contents of every matched
    file, and a statistics summary.

    Examples:

        packfiles

        packfiles --dir ./project --include py,md --exclude ''

        packfiles -d src -i '' -e html,css --content out/content.txt
    """
    console = ConsoleManager(theme=theme)

    setup_logging(debug)

    try:
        config = build_config(root_dir, include, exclude, structure, content, summary,
                              show_progress=not no_progress)
        pipeline = PackPipeline(config)
        print_options(console, config)

        result = pipeline.run()

        console.print_success("Processing completed successfully!")
        console.print("")
        console.print_plain(SummaryReporter().format_console(result.statistics))

    except KeyboardInterrupt:
        console.print_error("Process terminated by user")
        sys.exit(1)

    except PackFilesError as e:
        console.print_error(e.message)
        sys.exit(1)

    except Exception as e:
        console.print_error(f"Unexpected error: {e}")
        if debug:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
