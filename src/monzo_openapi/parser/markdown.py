"""Markdown scanning for the Monzo documentation convention.

Only two patterns are recognized: top-level `# Title` sections and fenced
shell blocks whose first line is an `$ http [--form] METHOD "URL"`
invocation. Everything else in the text is treated as opaque prose.
"""

import re

from monzo_openapi.config import DESCRIPTION_MAX_CHARS
from monzo_openapi.parser.base import RawExample, Section

SECTION_RE = re.compile(r"^# (.+?)[ \t]*$", re.MULTILINE)
SUBSECTION_RE = re.compile(r"^## (.+?)[ \t]*$", re.MULTILINE)
ENDPOINT_BOUNDARY_RE = re.compile(r"^#{1,2} ", re.MULTILINE)
ANY_HEADING_RE = re.compile(r"^#{1,6} ", re.MULTILINE)

SHELL_FENCE_RE = re.compile(r"^```(?:shell|sh|bash)[ \t]*\n(.*?)^```[ \t]*$", re.DOTALL | re.MULTILINE)
JSON_FENCE_RE = re.compile(r"^```json[ \t]*\n(.*?)^```[ \t]*$", re.DOTALL | re.MULTILINE)
ANY_FENCE_RE = re.compile(r"^```[^\n]*\n.*?^```[ \t]*$", re.DOTALL | re.MULTILINE)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")
COMMAND_RE = re.compile(
    r"\$ http(?P<form>[ \t]+--form)?[ \t]+"
    rf"(?P<method>{'|'.join(HTTP_METHODS)})[ \t]+"
    r'"(?P<url>https?://[^"\s]+)"'
)


def extract_sections(text: str) -> list[Section]:
    """Split the text into top-level sections, in document order.

    A section body runs from the line after its heading up to the next
    top-level heading; deeper headings stay inside the body.
    """
    headings = _headings(SECTION_RE, text)
    sections = []
    for i, match in enumerate(headings):
        start = min(match.end() + 1, len(text))
        end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
        body = text[start:end]
        sections.append(
            Section(
                title=match.group(1).strip(),
                body=body,
                description=_describe(body),
                start=start,
                end=end,
            )
        )
    return sections


def _describe(body: str) -> str:
    """First block of contiguous non-blank lines, joined and capped."""
    block: list[str] = []
    for line in body.splitlines():
        if line.strip():
            block.append(line.strip())
        elif block:
            break
    return " ".join(block)[:DESCRIPTION_MAX_CHARS].strip()


def extract_examples(text: str) -> list[RawExample]:
    """Find every shell block that starts with an `$ http` invocation."""
    examples = []
    for fence in SHELL_FENCE_RE.finditer(text):
        content = fence.group(1).lstrip()
        command = COMMAND_RE.match(content)
        if not command:
            continue
        examples.append(
            RawExample(
                method=command.group("method"),
                url=command.group("url"),
                trailer=content[command.end():],
                form=bool(command.group("form")),
                start=fence.start(),
                end=fence.end(),
            )
        )
    return examples


def find_json_body(text: str, pos: int) -> str | None:
    """Return the JSON block following `pos`, if one comes before the next heading or `$ http` block."""
    match = JSON_FENCE_RE.search(text, pos)
    if not match:
        return None
    gap = text[pos:match.start()]
    if _headings(ANY_HEADING_RE, text, pos, match.start()) or "$ http" in gap:
        return None
    return match.group(1).strip()


def find_summary(text: str, start: int, end: int) -> tuple[str, int] | None:
    """Nearest `## ` heading in text[start:end], as (title, offset)."""
    headings = _headings(SUBSECTION_RE, text, start, end)
    if not headings:
        return None
    last = headings[-1]
    return last.group(1).strip(), last.start()


def endpoint_text(text: str, start: int, pos: int) -> str:
    """Prose describing the endpoint around `pos`: from `start` to the next `#`/`##` heading."""
    boundaries = _headings(ENDPOINT_BOUNDARY_RE, text, pos)
    end = boundaries[0].start() if boundaries else len(text)
    return text[start:end]


def _headings(pattern: re.Pattern, text: str, start: int = 0, end: int | None = None) -> list[re.Match]:
    """Matches of a heading pattern in text[start:end] that are not inside a fenced code block."""
    end = len(text) if end is None else end
    fences = [(m.start(), m.end()) for m in ANY_FENCE_RE.finditer(text)]
    return [
        match
        for match in pattern.finditer(text, start, end)
        if not any(f_start <= match.start() < f_end for f_start, f_end in fences)
    ]
