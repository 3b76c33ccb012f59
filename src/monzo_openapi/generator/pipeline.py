"""Pipeline orchestrator: Markdown text in, OpenAPI document out."""

import logging

from monzo_openapi.config import UNCATEGORIZED_TAG
from monzo_openapi.generator.paths import MalformedExampleError
from monzo_openapi.generator.processor import merge_operation, process_example
from monzo_openapi.generator.skeleton import build_skeleton
from monzo_openapi.generator.supplemental import inject_missing
from monzo_openapi.parser.base import Document, Tag
from monzo_openapi.parser.markdown import extract_examples, extract_sections

logger = logging.getLogger(__name__)


def generate(text: str) -> Document:
    """Build the full document from the concatenated documentation text.

    Malformed examples are logged and skipped; the rest of the pipeline
    carries on, so some document is always returned.
    """
    doc = build_skeleton()

    sections = extract_sections(text)
    for section in sections:
        doc.add_tag(Tag(name=section.title, description=section.description))

    examples = extract_examples(text)
    logger.debug("Found %d sections and %d examples", len(sections), len(examples))

    for raw in examples:
        try:
            path, method, operation = process_example(raw, sections, text)
        except MalformedExampleError as e:
            logger.warning("Skipping example %s %s: %s", raw.method, raw.url, e)
            continue
        merge_operation(doc, path, method, operation)

    used = any(UNCATEGORIZED_TAG in op.tags for _, _, op in doc.operations())
    if used and not doc.has_tag(UNCATEGORIZED_TAG):
        doc.add_tag(Tag(name=UNCATEGORIZED_TAG))

    return inject_missing(doc)
