#!/usr/bin/env python3
"""
Local Model Advisor
Main entry point with CLI interface
"""

import functools
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from model_advisor import __version__
from model_advisor.catalog import ModelCatalog
from model_advisor.catalog_data import BUILTIN_CATALOG
from model_advisor.config import AdvisorConfig
from model_advisor.hardware import CpuType, GpuVendor, HardwareProfile, load_hardware_profile
from model_advisor.recommendation import evaluate, export_recommendations
from model_advisor.ranking import TOP_N
from model_advisor.selector import ModelSelector
from model_advisor.use_cases import UseCase

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger(__name__)


def fail(console: Console, message: str) -> None:
    """Report an error and exit with status 1"""
    console.print(f"[red]❌ {message}[/red]")
    sys.exit(1)


def load_catalog(ctx: click.Context) -> ModelCatalog:
    models_file = ctx.obj.get('models_file')
    if models_file:
        return ModelCatalog.from_file(models_file)
    return BUILTIN_CATALOG


def hardware_options(func):
    """Options describing the hardware; unset ones fall back to the saved profile"""
    options = [
        click.option('--hardware-file', type=click.Path(exists=True, dir_okay=False),
                     help='JSON or YAML hardware profile'),
        click.option('--gpu-vendor', type=click.Choice([v.value for v in GpuVendor]),
                     help='GPU vendor'),
        click.option('--vram', type=float, help='GPU memory in GB'),
        click.option('--ram', type=float, help='System RAM in GB'),
        click.option('--cpu-type', type=click.Choice([c.value for c in CpuType]),
                     help='CPU family'),
        click.option('--os', 'os_name', help='Operating system'),
        click.option('--disk', type=float, help='Free disk space in GB'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_hardware(config: AdvisorConfig, hardware_file: Optional[str], **overrides) -> HardwareProfile:
    """Hardware file or saved profile, then individual option overrides"""
    if hardware_file:
        hardware = load_hardware_profile(Path(hardware_file))
    else:
        hardware = config.hardware_or_default()

    fields = {
        'gpu_vendor': overrides.get('gpu_vendor'),
        'vram_gb': overrides.get('vram'),
        'ram_gb': overrides.get('ram'),
        'cpu_type': overrides.get('cpu_type'),
        'os': overrides.get('os_name'),
        'disk_space_gb': overrides.get('disk'),
    }
    return replace(hardware, **{k: v for k, v in fields.items() if v is not None})


def handle_errors(func):
    """Print failures the way every command does"""
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        console = Console()
        try:
            return func(ctx, *args, **kwargs)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user.[/yellow]")
            sys.exit(0)
        except Exception as e:
            if ctx.obj.get('verbose'):
                logger.exception("Detailed error information")
            fail(console, f"Error: {e}")
    return wrapper


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--models-file', type=click.Path(exists=True), help='Path to a models JSON file')
@click.pass_context
def cli(ctx, verbose: bool, models_file: Optional[str]):
    """Local Model Advisor - Find AI models that run well on your hardware"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Store common options in context
    ctx.ensure_object(dict)
    ctx.obj['models_file'] = Path(models_file) if models_file else None
    ctx.obj['verbose'] = verbose


@cli.command()
@hardware_options
@click.option('--use-case', 'use_cases', multiple=True,
              type=click.Choice([u.value for u in UseCase], case_sensitive=False),
              help='Use case to cover (repeatable)')
@click.option('--top-n', type=click.IntRange(min=1), default=TOP_N, show_default=True,
              help='Number of recommendations to show')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'csv', 'yaml']),
              default='table', show_default=True, help='Output format')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the export to a file')
@click.pass_context
@handle_errors
def recommend(ctx, hardware_file, gpu_vendor, vram, ram, cpu_type, os_name, disk,
              use_cases: tuple, top_n: int, output_format: str, output: Optional[str]):
    """Get model recommendations for a hardware profile and use cases"""
    console = Console()
    config = AdvisorConfig()
    catalog = load_catalog(ctx)

    hardware = resolve_hardware(
        config, hardware_file,
        gpu_vendor=gpu_vendor, vram=vram, ram=ram, cpu_type=cpu_type, os_name=os_name, disk=disk,
    )
    if not use_cases:
        logger.warning("No use cases given; every model is treated as relevant")

    result = evaluate(hardware, use_cases, catalog=catalog, limit=top_n)

    if output_format == 'table':
        selector = ModelSelector(catalog=catalog, config=config, console=console)
        selector.display_hardware_info(hardware)
        selector.display_recommendations(result, hardware)
        return

    exported = export_recommendations(result, output_format)
    if output:
        Path(output).write_text(exported)
        console.print(f"✅ Recommendations saved to [bold green]{output}[/bold green]")
    else:
        click.echo(exported)


@cli.command()
@click.pass_context
@handle_errors
def interactive(ctx):
    """Run the interactive model selection process"""
    selector = ModelSelector(catalog=load_catalog(ctx))
    selector.run_interactive()


@cli.command()
@click.option('--name', help='Show details for one model')
@click.option('--search', default='', help='Filter by text in name or description')
@click.option('--provider', help='Filter by provider')
@click.pass_context
@handle_errors
def models(ctx, name: Optional[str], search: str, provider: Optional[str]):
    """Browse the model catalog"""
    console = Console()
    catalog = load_catalog(ctx)
    selector = ModelSelector(catalog=catalog, console=console)

    if name:
        model = catalog.get(name)
        if not model:
            fail(console, f"Model '{name}' not found")
        selector.display_model(model)
        return

    if provider and provider not in catalog.providers():
        fail(console, f"Unknown provider '{provider}'. Known: {', '.join(catalog.providers())}")

    selector.display_catalog(catalog.search(search, provider))


@cli.command(name='use-cases')
@click.pass_context
@handle_errors
def use_cases_command(ctx):
    """List use cases and the capability tags they map to"""
    ModelSelector(catalog=load_catalog(ctx)).display_use_cases()


@cli.group()
def hardware():
    """Manage the saved hardware profile"""


@hardware.command('show')
@click.pass_context
@handle_errors
def hardware_show(ctx):
    """Display the saved hardware profile (or the defaults)"""
    config = AdvisorConfig()
    if config.hardware is None:
        Console().print("[yellow]No saved profile, showing defaults[/yellow]")
    ModelSelector(config=config).display_hardware_info(config.hardware_or_default())


@hardware.command('save')
@hardware_options
@click.pass_context
@handle_errors
def hardware_save(ctx, hardware_file, gpu_vendor, vram, ram, cpu_type, os_name, disk):
    """Save a hardware profile for later commands"""
    console = Console()
    config = AdvisorConfig()
    config.hardware = resolve_hardware(
        config, hardware_file,
        gpu_vendor=gpu_vendor, vram=vram, ram=ram, cpu_type=cpu_type, os_name=os_name, disk=disk,
    )
    config.save()
    console.print(f"[green]✅ Hardware profile saved to {config.path}[/green]")


@hardware.command('clear')
@click.pass_context
@handle_errors
def hardware_clear(ctx):
    """Remove the saved hardware profile and use cases"""
    console = Console()
    if AdvisorConfig().clear():
        console.print("[green]✅ Saved configuration cleared[/green]")
    else:
        console.print("[yellow]⚠️ No saved configuration found[/yellow]")


@cli.command()
def version():
    """Show version information"""
    console = Console()
    console.print(f"[cyan]Local Model Advisor v{__version__}[/cyan]")
    console.print(f"[dim]Python {sys.version.split()[0]}[/dim]")


if __name__ == '__main__':
    cli()
