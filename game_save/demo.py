"""
    Runs the two sample save cases end to end:

    1. A valid save ("forest") is written as JSON and XML, then the JSON file is read back and shown.
    2. A save with a negative item quantity ("cave") is attempted in both formats; each attempt
       fails validation, the error is reported and the run goes on.

    Finally the output directory is listed with file sizes.

    ```bash
    python -m game_save.demo
    ```
"""
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table

from game_save.exceptions import GameSaveException
from game_save.logger import logger
from game_save.model import SaveRecord
from game_save.samples import load_samples
from game_save.storage import ensure_dir, read_text, save_json, save_xml

module_logger = logger.getChild("demo")

DEFAULT_OUTPUT_DIR = Path("GameSaves")
SEPARATOR = "-" * 40


class DemoReport(BaseModel):
    written: list[Path] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


def _save_all_formats(save: SaveRecord, output_dir: Path, report: DemoReport, console: Console) -> None:
    for label, writer, suffix in (("JSON", save_json, ".json"), ("XML", save_xml, ".xml")):
        path = output_dir / f"{save.file_name}{suffix}"
        try:
            writer(save, path)
        except (GameSaveException, OSError) as e:
            report.errors.append(f"{label} {save.file_name}: {e}")
            console.print(f"[bold red]Error while saving {label}:[/bold red] {e}")
            continue
        report.written.append(path)
        console.print(f"[green]✓ {label} saved:[/green] {path.name}")


def _print_files(output_dir: Path, console: Console) -> None:
    table = Table(title="Created files")
    table.add_column("File", style="cyan")
    table.add_column("Size (bytes)", justify="right")
    for path in sorted(output_dir.iterdir()):
        if path.is_file():
            table.add_row(path.name, str(path.stat().st_size))
    console.print(table)


def run_demo(
    output_dir: Path | str = DEFAULT_OUTPUT_DIR,
    samples: dict[str, SaveRecord] | None = None,
    console: Console | None = None,
) -> DemoReport:
    console = console or Console()
    samples = samples if samples is not None else load_samples()
    output_dir = ensure_dir(output_dir)
    report = DemoReport()

    console.print("[bold]=== GAME SAVE SERIALIZATION TEST ===[/bold]\n")

    console.print("[bold]TEST 1: Valid save[/bold]")
    console.print(SEPARATOR)
    good_save = samples["forest"]
    _save_all_formats(good_save, output_dir, report, console)

    json_path = output_dir / f"{good_save.file_name}.json"
    if json_path in report.written:
        try:
            content = read_text(json_path)
        except OSError as e:
            report.errors.append(f"read {json_path.name}: {e}")
            console.print(f"[bold red]Error while reading {json_path.name}:[/bold red] {e}")
        else:
            console.print("\nJSON file content:")
            console.print(SEPARATOR)
            console.print(content, markup=False, highlight=False)

    console.print("\n\n[bold]TEST 2: Save with an error[/bold]")
    console.print(SEPARATOR)
    _save_all_formats(samples["cave"], output_dir, report, console)

    console.print("\n" + "=" * 50)
    _print_files(output_dir, console)

    module_logger.info(f"Demo finished: {len(report.written)} files written, {len(report.errors)} errors")
    return report


def main():
    run_demo()


if __name__ == "__main__":
    main()
