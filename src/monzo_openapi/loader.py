"""Documentation loader: reads Markdown fragments and concatenates them in order."""

from pathlib import Path


def collect_fragments(paths: list[Path]) -> list[Path]:
    """Expand directories into their `*.md` files (sorted by name), keeping argument order."""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob("*.md")))
        else:
            files.append(path)
    return files


def load_docs(paths: list[Path]) -> str:
    """Load and concatenate the content of the given fragments."""
    parts = [path.read_text(encoding="utf-8") for path in collect_fragments(paths)]
    return "\n\n".join(part.rstrip("\n") for part in parts) + ("\n" if parts else "")
