from typing import List
from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt


def clear_screen(console: Console) -> None:
    """Clear the terminal and move the cursor home."""
    console.clear()


def prompt_search_term(console: Console) -> str:
    return Prompt.ask("  Enter your search term", console=console)


def prompt_selection(labels: List[str], console: Console) -> int:
    """Show numbered labels and return the zero-based index of the user's choice."""
    if not labels:
        raise ValueError("Nothing to select from")

    console.print("[bold]Found results:[/bold]")
    for number, label in enumerate(labels, start=1):
        console.print(f"  [green]{number:>3}[/green]  {escape(label)}", highlight=False)

    while True:
        choice = IntPrompt.ask("  Pick a result", console=console, default=1)
        if 1 <= choice <= len(labels):
            return choice - 1
        console.print(f"  [red]Please enter a number between 1 and {len(labels)}.[/red]")
