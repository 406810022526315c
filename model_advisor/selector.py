"""
Model selection interface with rich CLI
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, Prompt
from rich.table import Table
from rich.text import Text

from .catalog import Backend, ModelCatalog, ModelDescriptor
from .catalog_data import BUILTIN_CATALOG
from .config import AdvisorConfig
from .hardware import CpuType, GpuVendor, HardwareClass, HardwareProfile, classify_hardware
from .recommendation import RecommendationResult, evaluate, export_recommendations
from .use_cases import USE_CASE_GROUPS, UseCase, parse_use_case, tags_for

logger = logging.getLogger(__name__)

MEMORY_LABELS = {
    HardwareClass.UNIFIED: "Unified Memory",
    HardwareClass.INTEGRATED: "Shared Memory (VRAM)",
    HardwareClass.DISCRETE: "Video Memory (VRAM)",
}


def numbered_use_cases() -> List[UseCase]:
    """Use cases in display order; list index + 1 is the menu number"""
    return [use_case for _, items in USE_CASE_GROUPS for use_case in items]


def parse_selection(answer: str, options: Sequence[UseCase]) -> List[UseCase]:
    """Turn "1, 4 7" style input into use cases, ignoring bad numbers"""
    selected = []
    for token in answer.replace(",", " ").split():
        if not token.isdigit():
            continue
        index = int(token) - 1
        if 0 <= index < len(options) and options[index] not in selected:
            selected.append(options[index])
    return selected


class ModelSelector:
    """Rich front end around the recommendation engine"""

    def __init__(
        self,
        catalog: Optional[ModelCatalog] = None,
        config: Optional[AdvisorConfig] = None,
        console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.catalog = catalog if catalog is not None else BUILTIN_CATALOG
        self.config = config or AdvisorConfig()

    def display_hardware_info(self, hardware: HardwareProfile) -> None:
        """Display hardware information in a formatted panel"""
        hardware_class = classify_hardware(hardware)

        table = Table(title="Hardware Profile", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Operating System", hardware.os)
        table.add_row("CPU", hardware.cpu_type)
        table.add_row("GPU Vendor", hardware.gpu_vendor)
        table.add_row(MEMORY_LABELS[hardware_class], f"{hardware.vram_gb:g} GB")
        table.add_row("System RAM", f"{hardware.ram_gb:g} GB")
        table.add_row("Free Disk", f"{hardware.disk_space_gb:g} GB")
        table.add_row("Memory Architecture", hardware_class.value.title())

        self.console.print(Panel(table, title="Hardware", border_style="blue"))

    def display_use_cases(self) -> None:
        """List use cases by category with their capability tags"""
        table = Table(title="Use Cases")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Category", style="cyan")
        table.add_column("Use Case", style="white")
        table.add_column("Capability Tags", style="green")

        number = 1
        for category, items in USE_CASE_GROUPS:
            for use_case in items:
                table.add_row(str(number), category, use_case.value, ", ".join(tags_for(use_case)) or "-")
                number += 1

        self.console.print(table)

    def ask_hardware(self) -> HardwareProfile:
        """Ask for the hardware profile, defaulting to the saved one"""
        saved = self.config.hardware_or_default()
        self.console.print(Panel(
            "[bold cyan]Describe the machine the models will run on[/bold cyan]",
            title="Step 1: Hardware",
            border_style="blue"
        ))

        gpu_vendor = Prompt.ask(
            "GPU vendor", choices=[v.value for v in GpuVendor], default=saved.gpu_vendor
        )
        vram_gb = FloatPrompt.ask("GPU memory (GB)", default=saved.vram_gb)
        ram_gb = FloatPrompt.ask("System RAM (GB)", default=saved.ram_gb)
        cpu_type = Prompt.ask(
            "CPU type", choices=[c.value for c in CpuType], default=saved.cpu_type
        )
        os_name = Prompt.ask("Operating system", default=saved.os)
        disk_space_gb = FloatPrompt.ask("Free disk space (GB)", default=saved.disk_space_gb)

        hardware = HardwareProfile(
            gpu_vendor=gpu_vendor,
            vram_gb=vram_gb,
            ram_gb=ram_gb,
            cpu_type=cpu_type,
            os=os_name,
            disk_space_gb=disk_space_gb,
        )

        self.config.hardware = hardware
        self.config.save()
        return hardware

    def ask_use_cases(self) -> List[UseCase]:
        """Ask which use cases to cover; at least one is required"""
        options = numbered_use_cases()
        self.display_use_cases()

        resolved = (parse_use_case(v) for v in self.config.use_cases)
        previous = [u for u in resolved if isinstance(u, UseCase)]
        if previous:
            names = ", ".join(u.value for u in previous)
            if Confirm.ask(f"Use previous selection: {names}?"):
                return previous

        while True:
            answer = Prompt.ask("Select use cases (numbers separated by spaces or commas)")
            selected = parse_selection(answer, options)
            if selected:
                self.config.use_cases = selected
                self.config.save()
                return selected
            self.console.print(f"[red]Select at least one use case (1-{len(options)}).[/red]")

    def display_recommendations(self, result: RecommendationResult, hardware: HardwareProfile) -> None:
        """Display recommendations in a formatted table"""
        if not result.models:
            self.console.print(Panel(
                "[red]No models found that meet your requirements.[/red]\n"
                "Your hardware may have limitations. Consider:\n"
                "• Selecting different use cases\n"
                "• Freeing RAM or disk space\n"
                "• Using cloud services",
                title="No Suitable Models",
                border_style="red"
            ))
            return

        table = Table(title=f"Model Recommendations - {classify_hardware(hardware).value.title()} Memory")
        table.add_column("Rank", style="bold cyan", width=4)
        table.add_column("Model", style="bold white", min_width=20)
        table.add_column("Size", style="yellow", justify="right")
        table.add_column("Backend", style="green")
        table.add_column("Fit", style="magenta", justify="center")
        table.add_column("License", style="blue", max_width=20)
        table.add_column("Why", style="dim", max_width=40)

        for i, model in enumerate(result.models, 1):
            fit = model.benchmarks[0].score if model.benchmarks else 0
            stars = "⭐" * min(5, int(fit / 20))
            table.add_row(
                f"#{i}",
                f"{model.name} ({model.recommended_quantization})",
                model.size_params,
                model.backend.upper(),
                f"{stars} ({model.score})",
                model.license,
                model.reason,
                style="bold green" if i == 1 else None
            )

        self.console.print(Panel(table, title="Recommended Models", border_style="green"))
        self.console.print(f"[cyan]{result.summary}[/cyan]")
        self.console.print(f"[dim]{result.hardware_notes}[/dim]")

        # Install hints for the top recommendation
        top = result.models[0]
        hints = Text()
        hints.append("Get started with ", style="bold cyan")
        hints.append(top.name, style="bold green")
        for label, command in (
            ("Ollama", top.ollama_command),
            ("llama.cpp", top.llama_cpp_command),
            ("MLX", top.install_command),
            ("LM Studio", top.lm_studio_command),
            ("Pinokio", top.pinokio_link),
            ("Hugging Face", top.hf_url),
            ("GGUF file", top.hf_gguf),
        ):
            if command:
                hints.append(f"\n{label}: ", style="cyan")
                hints.append(command)
        self.console.print(Panel(hints, border_style="cyan"))

    def display_catalog(self, models: Sequence[ModelDescriptor]) -> None:
        """List catalog entries"""
        table = Table(title=f"Model Catalog ({len(models)} shown of {len(self.catalog)})")
        table.add_column("Name", style="cyan")
        table.add_column("Provider", style="white")
        table.add_column("Type", style="yellow")
        table.add_column("Params", style="green", justify="right")
        table.add_column("Backend", style="blue")
        table.add_column("Min RAM/VRAM", style="magenta", justify="right")
        table.add_column("MLX", justify="center")

        for model in models:
            table.add_row(
                model.name,
                model.provider,
                model.type,
                f"{model.params_b:g}B",
                Backend(model.backend).value,
                f"{model.min_hardware.ram_gb:g} / {model.min_hardware.vram_gb:g} GB",
                "✅" if model.apple_silicon_optimized else "",
            )

        self.console.print(table)

    def display_model(self, model: ModelDescriptor) -> None:
        """Show one catalog entry in detail"""
        table = Table(title=f"Model: {model.name}", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Repository", model.repo)
        table.add_row("Publisher", model.publisher)
        table.add_row("Provider", model.provider)
        table.add_row("Parameters", f"{model.params_b:g}B")
        table.add_row("Type", model.type)
        table.add_row("License", model.license)
        table.add_row("Formats", ", ".join(sorted(model.formats)))
        table.add_row("Quantization", model.quantization)
        table.add_row("Min RAM", f"{model.min_hardware.ram_gb:g} GB")
        table.add_row("Min VRAM", f"{model.min_hardware.vram_gb:g} GB")
        table.add_row("Min CPU", model.min_hardware.cpu)
        table.add_row("Tasks", ", ".join(sorted(model.tasks)))
        table.add_row("Apple Silicon Optimized", "Yes" if model.apple_silicon_optimized else "No")
        table.add_row("Pinokio", "Yes" if model.pinokio else "No")
        if model.libraries:
            table.add_row("Libraries", ", ".join(model.libraries))
        if model.cloud_providers:
            table.add_row("Cloud Providers", ", ".join(model.cloud_providers))
        if model.description:
            table.add_row("Description", model.description)

        self.console.print(Panel(table, border_style="blue"))

    def save_results(self, result: RecommendationResult) -> Optional[Path]:
        """Save results to file with format choice"""
        if not result.models:
            return None

        if not Confirm.ask("Would you like to save these recommendations?"):
            return None

        export_format = Prompt.ask("Select format", choices=["json", "csv", "yaml"], default="json")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = Path(f"model_recommendations_{timestamp}.{export_format}")

        try:
            with open(filepath, 'w') as f:
                f.write(export_recommendations(result, export_format))
        except OSError as e:
            self.console.print(f"[red]❌ Failed to save results: {e}[/red]")
            return None

        self.console.print(f"✅ Recommendations saved to [bold green]{filepath}[/bold green]")
        return filepath

    def run_interactive(self) -> Optional[RecommendationResult]:
        """Run the interactive model selection process"""
        self.console.print(Panel(
            "[bold cyan]Local Model Advisor[/bold cyan]\n"
            "Recommendations for models you can run on your own hardware",
            title="Welcome",
            border_style="blue"
        ))

        hardware = self.ask_hardware()
        self.display_hardware_info(hardware)
        use_cases = self.ask_use_cases()

        self.console.print("\n[bold cyan]Analyzing models...[/bold cyan]")
        result = evaluate(hardware, use_cases, catalog=self.catalog)

        self.display_recommendations(result, hardware)
        self.save_results(result)
        return result
