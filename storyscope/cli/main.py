"""CLI interface for StoryScope"""

import sys
from pathlib import Path
from typing import List, Optional

import click
import yaml
from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from storyscope.analyzers.scene import get_scene_templates
from storyscope.config import AppConfig, OutputFormat, load_config, setup_logging
from storyscope.errors import StoryScopeError
from storyscope.models import StoryAnalysis, Scene, SceneTemplate
from storyscope.orchestrator import StoryAnalyzer, SceneAnalyzer


console = Console()


def wants_json(config: AppConfig, as_json: bool) -> bool:
    return as_json or config.output.format == OutputFormat.JSON


def fail(message: str):
    """Print an error and exit with a non-zero status"""
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        fail(f"Cannot read {path}: {e}")


def print_story(analysis: StoryAnalysis):
    """Summarize a story analysis as rich tables"""
    structure = analysis.structure
    present = sum(1 for p in analysis.plot_points if p.present)

    console.print(Panel(
        f"[bold]Structure:[/bold] {structure.type.value}\n"
        f"[bold]Completeness:[/bold] {structure.completeness:.0%}   "
        f"[bold]Adherence:[/bold] {structure.adherence:.0%}\n"
        f"[bold]Plot points:[/bold] {present}/{len(analysis.plot_points)} present\n"
        f"[bold]Pacing:[/bold] {analysis.pacing.overall_pacing.value}\n"
        f"[bold]Genre:[/bold] {analysis.genre.primary.name} ({analysis.genre.primary.confidence:.0%})\n\n"
        f"{analysis.synopsis.short}",
        title=analysis.title or "Untitled",
        border_style="blue"
    ))

    table = Table(title="Acts")
    table.add_column("Act", style="cyan")
    table.add_column("Sentences")
    table.add_column("Strength", justify="right")
    for act in structure.acts:
        table.add_row(act.name, f"{act.start_position}-{act.end_position}", f"{act.strength:.2f}")
    console.print(table)

    if analysis.characters:
        table = Table(title="Characters")
        table.add_column("Name", style="cyan")
        table.add_column("Role")
        table.add_column("Arc")
        table.add_column("Importance", justify="right")
        for character in analysis.characters:
            table.add_row(
                character.name,
                character.role.value,
                character.arc_type.value,
                f"{character.importance:.1f}",
            )
        console.print(table)

    if analysis.suggestions:
        table = Table(title="Suggestions")
        table.add_column("Priority", style="magenta")
        table.add_column("Type")
        table.add_column("Description")
        for suggestion in analysis.suggestions:
            table.add_row(suggestion.priority.value, suggestion.type.value, suggestion.description)
        console.print(table)

    for logline in analysis.loglines:
        console.print(f"[bold]{logline.type.value.capitalize()} logline:[/bold] {logline.text}")


def print_scene(scene: Scene):
    """Summarize a scene breakdown as rich tables"""
    console.print(Panel(
        f"[bold]Location:[/bold] {scene.location.name} ({scene.location.type.value})\n"
        f"[bold]Visual mood:[/bold] {scene.visual_composition.mood.value}   "
        f"[bold]Cinematography:[/bold] {scene.visual_composition.style.cinematography.value}\n"
        f"[bold]Lighting:[/bold] {scene.lighting.style.value}, {scene.lighting.mood.value}, "
        f"{scene.lighting.color_temperature.kelvin}K\n"
        f"[bold]Music:[/bold] {', '.join(scene.audio.music.genre)}\n"
        f"[bold]Shoot date:[/bold] {scene.schedule.shoot_date.date().isoformat()}",
        title=scene.title,
        border_style="blue"
    ))

    table = Table(title="Shot List")
    table.add_column("#", style="cyan")
    table.add_column("Description")
    table.add_column("Size")
    table.add_column("Duration", justify="right")
    for shot in scene.shot_list:
        table.add_row(shot.number, shot.description, shot.shot_size.value, f"{shot.duration}s")
    console.print(table)

    table = Table(title="Budget")
    table.add_column("Category", style="cyan")
    table.add_column("Subtotal", justify="right")
    for category in scene.budget.breakdown:
        table.add_row(category.category, f"{category.subtotal:,.2f}")
    table.add_row("Contingency", f"{scene.budget.contingency:,.2f}")
    table.add_row("[bold]Total[/bold]", f"[bold]{scene.budget.total:,.2f} {scene.budget.currency}[/bold]")
    console.print(table)


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to config file"
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: Optional[Path], verbose: bool):
    """StoryScope - heuristic story and scene analysis"""
    try:
        app_config = load_config(config)
    except (ValueError, OSError, yaml.YAMLError) as e:
        fail(f"Invalid config: {e}")

    setup_logging("DEBUG" if verbose else app_config.logging.level)
    ctx.obj = app_config


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", type=str, help="Manuscript title (defaults to the file name)")
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis as JSON")
@click.pass_obj
def story(config: AppConfig, path: Path, title: Optional[str], as_json: bool):
    """Analyze the manuscript at PATH"""
    content = read_text(path)

    try:
        analyzer = StoryAnalyzer(ids=config.analysis.id_factory(), parallel=config.analysis.parallel)
        analysis = analyzer.analyze(title if title is not None else path.stem, content)
    except (StoryScopeError, ValueError) as e:
        fail(str(e))

    if wants_json(config, as_json):
        click.echo(analysis.model_dump_json(indent=2))
    else:
        print_story(analysis)


@main.command()
@click.argument("description", required=False)
@click.option(
    "--file", "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the scene description from a file"
)
@click.option("--json", "as_json", is_flag=True, help="Print the full scene as JSON")
@click.pass_obj
def scene(config: AppConfig, description: Optional[str], file_path: Optional[Path], as_json: bool):
    """Break down a scene DESCRIPTION into a production plan"""
    if file_path is not None:
        description = read_text(file_path)
    if description is None:
        fail("Provide a scene description or --file")

    try:
        analyzer = SceneAnalyzer(ids=config.analysis.id_factory(), parallel=config.analysis.parallel)
        result = analyzer.analyze(description)
    except (StoryScopeError, ValueError) as e:
        fail(str(e))

    if wants_json(config, as_json):
        click.echo(result.model_dump_json(indent=2))
    else:
        print_scene(result)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the templates as JSON")
@click.pass_obj
def templates(config: AppConfig, as_json: bool):
    """List the built-in scene templates"""
    scene_templates = get_scene_templates()

    if wants_json(config, as_json):
        click.echo(TypeAdapter(List[SceneTemplate]).dump_json(scene_templates, indent=2).decode())
        return

    table = Table(title="Scene Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Description")
    for template in scene_templates:
        table.add_row(template.id, template.name, template.category.value, template.description)
    console.print(table)


if __name__ == "__main__":
    main()
