"""Rich consoles: stdout carries results only, stderr carries everything else."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)
