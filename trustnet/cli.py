"""Command-line interface for trustnet."""

from pathlib import Path
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trustnet.config.schema import DEFAULT_SAMPLES
from trustnet.config import Config, ExperimentConfig, InputConfig, OutputConfig, SamplingConfig, load_config
from trustnet.data.loader import EdgeParseError
from trustnet.pipeline import AnalysisReport, run_from_config
from trustnet.utils.log import setup_logging

app = typer.Typer(
    name="trustnet",
    help="trustnet: structural statistics for signed-trust networks",
    add_completion=False
)
console = Console()


@app.command()
def analyze(
    edges_path: Path = typer.Argument(..., help="Edge list (source,target,rating[,time])"),
    samples: int = typer.Option(DEFAULT_SAMPLES, "--samples", "-n", min=0, help="Vertex pairs to sample"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for pair sampling"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Directory for plot images"),
    plots: bool = typer.Option(True, "--plots/--no-plots", help="Write plot images"),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Skip malformed lines instead of aborting"),
    top: int = typer.Option(10, "--top", min=0, help="Trust correlation rows to show"),
    verbose: bool = typer.Option(False, "--verbose/--quiet", help="Enable verbose output"),
):
    """Analyze an edge list with command-line settings.

    Example:
        trustnet analyze soc-sign-bitcoinalpha.csv --samples 100 --seed 7
    """
    config = Config(
        experiment=ExperimentConfig(seed=seed, verbose=verbose),
        input=InputConfig(path=str(edges_path), skip_invalid=skip_invalid),
        sampling=SamplingConfig(samples=samples),
        output=OutputConfig(directory=str(output_dir), plots=plots),
    )
    _execute(config, top)


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to configuration file (YAML/JSON)"),
    top: int = typer.Option(10, "--top", min=0, help="Trust correlation rows to show"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--quiet", help="Override the config verbosity"),
):
    """Analyze an edge list described by a config file.

    Example:
        trustnet run examples/bitcoinalpha.yaml
    """
    try:
        console.print(f"[bold blue]Loading configuration from:[/bold blue] {config_path}")
        config = load_config(config_path)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if verbose is not None:
        config.experiment.verbose = verbose
    _execute(config, top)


def _execute(config: Config, top: int) -> None:
    """Run the pipeline and print results, exiting with 1 on input errors."""
    setup_logging(config.experiment.verbose)

    try:
        report = run_from_config(config)
    except (FileNotFoundError, EdgeParseError) as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _display_results(report, top)


def _display_results(report: AnalysisReport, top: int) -> None:
    """Print the scalar results and the distribution tables."""
    console.print(f"Loaded {len(report.edges)} edges")
    console.print(
        f"Graph: {report.graph.num_vertices} vertices, "
        f"average degree {report.graph.avg_degree():.2f}"
    )
    console.print(f"Average distance between two random vertices: {report.average_distance:.2f}")
    sample = report.sample
    console.print(
        f"  [dim]{sample.valid_pairs} connected pairs, {sample.self_pairs} self pairs, "
        f"{sample.unreachable_pairs} unreachable of {sample.draws} draws[/dim]"
    )

    table = Table(title="Degree Distribution")
    table.add_column("Degree", style="cyan", justify="right")
    table.add_column("Vertices", style="green", justify="right")
    for degree in sorted(report.distribution):
        table.add_row(str(degree), str(report.distribution[degree]))
    console.print(table)

    if top and report.trust:
        trust_table = Table(title=f"Trust Rating vs Connections (top {top} by degree)")
        trust_table.add_column("Vertex", style="cyan", justify="right")
        trust_table.add_column("Degree", style="green", justify="right")
        trust_table.add_column("Average Trust", style="yellow", justify="right")
        ranked = sorted(report.trust, key=lambda p: (-p.degree, p.vertex))
        for point in ranked[:top]:
            trust_table.add_row(str(point.vertex), str(point.degree), f"{point.average_trust:.2f}")
        console.print(trust_table)

    for path in report.plots:
        console.print(f"[bold green]Saved[/bold green] {path}")


if __name__ == "__main__":
    app()
