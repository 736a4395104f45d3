"""CLI entry point for the SEO corpus audit."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_CONFIG, build_settings, load_config

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Route all log records through a rich handler on stderr."""
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(RichHandler(console=err_console, show_path=False, markup=False))
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """SEO corpus audit - metadata, readability and keyword statistics for a content tree."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    configure_logging(verbose)


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


@cli.command()
@click.option("--root", "root_dir", default=None, help="Directory to audit (default: ./src)")
@click.option("--out", "out_file", default=None, help="JSON report path (default: ./seo-report.json)")
@click.option("--stdout", "to_stdout", is_flag=True, help="Write the JSON report to stdout instead of a file")
@click.option("--site", "site_url", default=None, help="Site origin used to classify links")
@click.option("--min-doc-freq", type=int, default=None, help="Minimum document frequency for ranked terms")
@click.pass_context
def audit(ctx, root_dir, out_file, to_stdout, site_url, min_doc_freq):
    """Audit every page, post and data record under the root directory."""
    from .analysis.corpus import generate_report
    from .report.console import print_summary
    from .report.writer import write_report

    config = _get_config(ctx)
    if site_url:
        config["site_url"] = site_url
    if min_doc_freq is not None:
        config["tfidf"]["min_doc_freq"] = min_doc_freq

    root = Path(root_dir or config["root_dir"]).resolve()
    out = None if to_stdout else Path(out_file or config["out_file"]).resolve()
    report_opts = config.get("report", {})

    try:
        settings = build_settings(config)
        report = generate_report(root, settings)
        json_path, md_path = write_report(report, out, report_opts)
    except Exception as e:
        logger.debug("Audit failed", exc_info=True)
        raise click.ClickException(str(e)) from e

    # keep stdout clean for the JSON stream
    ui = err_console if to_stdout else console
    if json_path:
        ui.print(f"[green]✓ Wrote report to {json_path}[/]")
    if md_path:
        ui.print(f"[green]✓ Wrote human summary to {md_path}[/]")
    print_summary(report, ui, report_opts)


@cli.command()
@click.option("--path", default=None, help="Directory for the config file (default: current directory)")
def init(path):
    """Write a default seoaudit.yaml to tune weights, limits and stopwords."""
    import yaml

    target_dir = Path(path).expanduser().resolve() if path else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    config_file = target_dir / "seoaudit.yaml"
    if config_file.exists():
        console.print(f"[yellow]Config already exists: {config_file}[/]")
        return

    header = (
        "# SEO audit configuration\n"
        "# weights: how many times title/description/heading tokens repeat in the TF-IDF bag\n"
        "# data_only_dirs: JSON records here are not flagged for missing title/description/H1\n"
        "# extra_stopwords: additional tokens to ignore\n\n"
    )
    config_file.write_text(header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
    console.print(f"[bold green]✓ Created config: {config_file}[/]")


if __name__ == "__main__":
    cli()
