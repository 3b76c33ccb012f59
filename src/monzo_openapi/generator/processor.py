"""Example processor: turns one `$ http` example into an OpenAPI operation."""

import json
import logging
import re

from monzo_openapi.config import UNCATEGORIZED_TAG
from monzo_openapi.generator.paths import (
    MalformedExampleError,
    default_responses,
    operation_id_for,
    path_parameters,
    security_for,
    split_url,
    templatize,
)
from monzo_openapi.parser.base import Document, Operation, Parameter, RawExample, RequestBody, Section
from monzo_openapi.parser.markdown import endpoint_text, find_json_body, find_summary

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

QUERY_ARG_RE = re.compile(r"^(?P<name>[^\s=:]*)==(?P<value>.*)$")
FORM_ARG_RE = re.compile(r"^(?P<name>[^\s=:]*)=(?P<value>.*)$")
HEADER_RE = re.compile(r"^[A-Za-z][\w-]*:(?!=)")
REQUIRED_RE = re.compile(r"\brequired\b", re.IGNORECASE)
NOT_REQUIRED_RE = re.compile(r"\b(?:not|optional)\b", re.IGNORECASE)


def process_example(raw: RawExample, sections: list[Section], full_text: str) -> tuple[str, str, Operation]:
    """Derive (path template, method, operation) from a raw example.

    Raises MalformedExampleError when the URL or an argument line is unusable.
    """
    path, query_string = split_url(raw.url)
    parameters = path_parameters(path)

    section = find_section(sections, raw.start)
    span_start = section.start if section else 0
    tag = section.title if section else UNCATEGORIZED_TAG

    heading = find_summary(full_text, span_start, raw.start)
    if heading:
        summary, summary_pos = heading
    else:
        summary, summary_pos = f"{raw.method} {path}", span_start
    docs = endpoint_text(full_text, summary_pos, raw.end)

    query_args = _parse_query_string(query_string)
    trailer_query, form_fields = _parse_trailer(raw.trailer)
    for name, value in trailer_query.items():
        query_args.setdefault(name, value)

    parameters += [
        Parameter(
            name=name,
            location="query",
            required=_is_marked_required(name, docs),
            example=value,
        )
        for name, value in query_args.items()
    ]

    operation = Operation(
        operation_id=operation_id_for(raw.method, path),
        summary=summary,
        tags=[tag],
        parameters=parameters,
        request_body=_request_body(raw, form_fields, full_text),
        responses=default_responses(),
        security=security_for(path),
    )
    return path, raw.method.lower(), operation


def merge_operation(doc: Document, path: str, method: str, operation: Operation) -> None:
    """Insert into the document; a later example for the same path and method wins."""
    if method.lower() in doc.paths.get(path, {}):
        logger.debug("Replacing %s %s with a later example", method.upper(), path)
    doc.add_operation(path, method, operation, overwrite=True)


def find_section(sections: list[Section], offset: int) -> Section | None:
    """The section whose body span contains `offset`."""
    for section in sections:
        if section.start <= offset < section.end:
            return section
    return None


def _example_value(value: str) -> str | None:
    value = templatize(value.strip())
    return value or None


def _parse_query_string(query: str) -> dict[str, str | None]:
    args: dict[str, str | None] = {}
    for item in query.split("&"):
        if not item:
            continue
        if "==" in item:
            name, value = item.split("==", 1)
        elif "=" in item:
            name, value = item.split("=", 1)
        else:
            name, value = item, ""
        if not name:
            raise MalformedExampleError(f"Query argument without a name: {item!r}")
        args.setdefault(name, _example_value(value))
    return args


def _parse_trailer(trailer: str) -> tuple[dict[str, str | None], dict[str, str | None]]:
    """Split trailer lines into `name==value` query args and `name=value` form fields."""
    query: dict[str, str | None] = {}
    fields: dict[str, str | None] = {}
    for line in trailer.splitlines():
        item = line.strip()
        if item.endswith("\\"):
            item = item[:-1].strip()
        if len(item) >= 2 and item[0] == item[-1] and item[0] in "\"'":
            item = item[1:-1]
        if not item or HEADER_RE.match(item):
            continue

        match = QUERY_ARG_RE.match(item)
        target = query
        if not match:
            match = FORM_ARG_RE.match(item)
            target = fields
        if not match:
            continue
        if not match.group("name"):
            raise MalformedExampleError(f"Argument without a name: {item!r}")
        target[match.group("name")] = _example_value(match.group("value"))
    return query, fields


def _is_marked_required(name: str, docs: str) -> bool:
    """True when a line of the endpoint's prose names `name` in backticks and says Required.

    Lines that also say "not" or "optional" do not count.
    """
    marker = f"`{name}`"
    return any(
        marker in line and REQUIRED_RE.search(line) and not NOT_REQUIRED_RE.search(line)
        for line in docs.splitlines()
    )


def _request_body(raw: RawExample, form_fields: dict[str, str | None], full_text: str) -> RequestBody | None:
    if raw.form:
        return RequestBody(content_type=FORM_CONTENT_TYPE, example=dict(form_fields), fields=form_fields)

    body = find_json_body(full_text, raw.end)
    if body is None:
        return None
    try:
        example = json.loads(body)
    except (ValueError, RecursionError):
        logger.debug("JSON block after %s %s does not parse; keeping it verbatim", raw.method, raw.url)
        example = body
    return RequestBody(content_type=JSON_CONTENT_TYPE, example=example)
