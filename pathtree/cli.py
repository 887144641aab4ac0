"""
Main entry point for the pathtree program. Accessed by 'pathtree' in the command line.
"""
from functools import update_wrapper
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
import click
from pydantic import ValidationError

from pathtree.config import ProjectionConfig, get_config
from pathtree.core import ConflictPolicy, PathConflictError, PathTree
from pathtree.io_functions import dump_document, load_document, save_document
from pathtree.utils.parse import as_value

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Set up console logging, plus a rotating log file if asked for."""
    console_level = logging.DEBUG if verbose else logging.WARNING
    file_level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler()
    console.setLevel(console_level)
    logging.basicConfig(
        level=min(console_level, file_level) if log_file is not None else console_level,
        format=LOG_FORMAT,
        handlers=[console],
    )
    if log_file is not None:
        handler = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(file_level)
        logging.getLogger().addHandler(handler)


def pass_config(f):
    """
    Decorator to pass a ProjectionConfig to Click commands that need it.
    Ensures the config is loaded once and passed as the first argument.
    """
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        ctx.ensure_object(dict)
        cfg = ctx.obj.get('config')
        if cfg is None:
            opts = ctx.obj.get('global_opts', {})
            try:
                cfg = get_config(opts.get('config_path'))
                if opts.get('output_format'):
                    cfg.output_format = opts['output_format']
            except (OSError, ValueError, ValidationError) as e:
                raise click.ClickException(f"Invalid configuration: {e}") from e
            ctx.obj['config'] = cfg
        return f(cfg, *args, **kwargs)
    return update_wrapper(new_func, f)


def load_tree(document: Path, cfg: ProjectionConfig) -> PathTree:
    """Read a document into a PathTree, turning read errors into CLI errors."""
    try:
        data = load_document(document)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    return PathTree.from_map(data, policy=cfg.conflict_policy)


def echo_document(data, cfg: ProjectionConfig) -> None:
    """Print a document or value in the configured format."""
    click.echo(dump_document(data, cfg.output_format, cfg.indent))


@click.group()
@click.option('--config-path', type=click.Path(path_type=Path), default=None,
              help="YAML configuration file. Defaults to ./pathtree.yaml if present.")
@click.option('--format', 'output_format', type=click.Choice(["json", "yaml"]), default=None,
              help="Output format (overrides the configuration).")
@click.option('-v', '--verbose', is_flag=True, default=False,
              help="Very detailed logging for debugging purposes.")
@click.option('--log-file', type=click.Path(path_type=Path), default=None,
              help="Also write logs to this (rotating) file.")
@click.version_option(package_name="pathtree")
@click.pass_context
def main(ctx, config_path, output_format, verbose, log_file):
    """pathtree: read, write and filter nested JSON/YAML documents with dot paths."""
    setup_logging(verbose, log_file)
    ctx.ensure_object(dict)
    ctx.obj['global_opts'] = {
        'config_path': config_path,
        'output_format': output_format,
    }


@main.command("get")
@pass_config
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("path")
def get_cmd(cfg: ProjectionConfig, document: Path, path: str):
    """
    Print the value stored at PATH.

    Example: pathtree get record.json address.city
    """
    tree = load_tree(document, cfg)
    value, found = tree.get(path)
    if not found:
        click.echo(f"Path '{path}' not found in {document}", err=True)
        sys.exit(1)
    echo_document(value, cfg)


@main.command("set")
@pass_config
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("path")
@click.argument("value")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Write the updated document to this file instead of printing it.")
@click.option("--in-place", is_flag=True, default=False,
              help="Write the updated document back to DOCUMENT.")
@click.option("--strict", is_flag=True, default=False,
              help="Refuse to replace a stored value with a nested map.")
def set_cmd(cfg: ProjectionConfig, document: Path, path: str, value: str,
            output: Path | None, in_place: bool, strict: bool):
    """
    Store VALUE at PATH, creating nested maps as needed. VALUE is read as YAML.

    Example: pathtree set record.json address.zip 12345
    """
    tree = load_tree(document, cfg)
    if strict:
        tree.policy = ConflictPolicy.ERROR
    try:
        tree.set(path, as_value(value))
    except PathConflictError as e:
        raise click.ClickException(str(e)) from e

    target = document if in_place else output
    if target is not None:
        save_document(target, tree.as_map(), cfg.indent)
        click.echo(f"Wrote {target}")
    else:
        echo_document(tree.as_map(), cfg)


@main.command("filter")
@pass_config
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("paths", nargs=-1)
def filter_cmd(cfg: ProjectionConfig, document: Path, paths: tuple[str, ...]):
    """
    Print only the parts of DOCUMENT found at PATHS (and the config's paths).
    Missing paths are ignored.

    Example: pathtree filter record.json name address.city
    """
    wanted = [*cfg.paths, *paths]
    if not wanted:
        raise click.UsageError("Give at least one PATH or list 'paths' in the configuration.")
    tree = load_tree(document, cfg)
    echo_document(tree.filter(wanted).as_map(), cfg)


@main.command("paths")
@pass_config
@click.argument("document", type=click.Path(path_type=Path))
def paths_cmd(cfg: ProjectionConfig, document: Path):
    """List the path of every leaf value in DOCUMENT."""
    tree = load_tree(document, cfg)
    for path in tree.paths():
        click.echo(path)


@main.command("config")
@pass_config
def config_cmd(cfg: ProjectionConfig):
    """
    Show the current configuration.
    """
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
