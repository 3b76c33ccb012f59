"""Serializes a generated document to YAML or JSON."""

import json
from pathlib import Path

import yaml

from monzo_openapi.config import YAML_LINE_WIDTH
from monzo_openapi.parser.base import Document


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated objects out in full instead of as &anchors."""

    def ignore_aliases(self, data):
        return True


def dump_yaml(doc: Document) -> str:
    return yaml.dump(
        doc.to_openapi(),
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
        width=YAML_LINE_WIDTH,
    )


def dump_json(doc: Document) -> str:
    return json.dumps(doc.to_openapi(), indent=2, ensure_ascii=False) + "\n"


def write_document(doc: Document, path: Path) -> Path:
    """Write the document, as JSON for a `.json` suffix and YAML otherwise."""
    if path.suffix.lower() == ".json":
        content = dump_json(doc)
    else:
        content = dump_yaml(doc)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
