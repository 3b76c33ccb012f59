"""Data models for the documentation-to-OpenAPI pipeline.

The extractors produce Sections and RawExamples from the Markdown text;
the generator turns them into Operations collected in a Document, which
renders itself into a plain OpenAPI mapping.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """A top-level (`# Title`) section of the documentation."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    description: str
    start: int  # offset of the body in the full text
    end: int


class RawExample(BaseModel):
    """An `$ http METHOD "url"` block as found in the text, before any interpretation."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    trailer: str  # everything after the URL up to the closing fence
    form: bool = False
    start: int = 0  # offset of the opening fence
    end: int = 0  # offset just past the closing fence


class Parameter(BaseModel):
    """A query or path parameter of an operation."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # query / path
    required: bool
    example: str | None = None

    def to_openapi(self) -> dict:
        data = {
            "name": self.name,
            "in": self.location,
            "required": self.required,
            "schema": {"type": "string"},
        }
        if self.example is not None:
            data["example"] = self.example
        return data


class RequestBody(BaseModel):
    """Example request body, either form-urlencoded fields or a JSON document."""

    model_config = ConfigDict(frozen=True)

    content_type: str
    example: Any = None
    fields: dict[str, str | None] = {}  # form field name -> example value

    def to_openapi(self) -> dict:
        if self.fields:
            schema = {
                "type": "object",
                "properties": {name: {"type": "string"} for name in self.fields},
            }
        else:
            schema = {"type": "object"}
        media = {"schema": schema}
        if self.example is not None:
            media["example"] = self.example
        return {"required": True, "content": {self.content_type: media}}


class Operation(BaseModel):
    """One HTTP method on one path template."""

    model_config = ConfigDict(frozen=True)

    operation_id: str
    summary: str
    tags: list[str]
    parameters: list[Parameter] = []
    request_body: RequestBody | None = None
    responses: dict
    security: list[dict[str, list[str]]]

    def to_openapi(self) -> dict:
        data: dict[str, Any] = {
            "operationId": self.operation_id,
            "summary": self.summary,
            "tags": list(self.tags),
        }
        if self.parameters:
            data["parameters"] = [p.to_openapi() for p in self.parameters]
        if self.request_body is not None:
            data["requestBody"] = self.request_body.to_openapi()
        data["responses"] = self.responses
        data["security"] = self.security
        return data


class Tag(BaseModel):
    """Operation group, one per documentation section."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class Document(BaseModel):
    """The OpenAPI document being assembled.

    `paths` maps a path template to a mapping of lower-case method to
    Operation. Insertion order is kept, so the rendered document follows
    the order in which operations were found.
    """

    openapi: str
    info: dict
    servers: list[dict]
    security_schemes: dict[str, dict]
    tags: list[Tag] = Field(default_factory=list)
    paths: dict[str, dict[str, Operation]] = Field(default_factory=dict)

    def add_tag(self, tag: Tag) -> None:
        """Register a tag; a repeated name keeps its position and takes the new description."""
        for i, existing in enumerate(self.tags):
            if existing.name == tag.name:
                self.tags[i] = tag
                return
        self.tags.append(tag)

    def has_tag(self, name: str) -> bool:
        return any(t.name == name for t in self.tags)

    def add_operation(self, path: str, method: str, operation: Operation, overwrite: bool = True) -> bool:
        """Merge an operation into `paths`.

        With `overwrite`, an operation already stored for the same path and
        method is replaced; without it the existing one is kept. The stored
        operation gets a unique operationId (numeric suffix on collision).
        Returns True when the operation was stored.
        """
        method = method.lower()
        methods = self.paths.setdefault(path, {})
        if method in methods and not overwrite:
            return False

        taken = {
            op.operation_id
            for p, ops in self.paths.items()
            for m, op in ops.items()
            if (p, m) != (path, method)
        }
        operation_id = operation.operation_id
        suffix = 2
        while operation_id in taken:
            operation_id = f"{operation.operation_id}{suffix}"
            suffix += 1
        if operation_id != operation.operation_id:
            operation = operation.model_copy(update={"operation_id": operation_id})

        methods[method] = operation
        return True

    def operations(self) -> list[tuple[str, str, Operation]]:
        """All (path, method, operation) triples in document order."""
        return [(path, method, op) for path, ops in self.paths.items() for method, op in ops.items()]

    def to_openapi(self) -> dict:
        """Render the plain mapping handed to the YAML/JSON serializers."""
        return {
            "openapi": self.openapi,
            "info": dict(self.info),
            "servers": [dict(s) for s in self.servers],
            "tags": [t.model_dump() for t in self.tags],
            "paths": {
                path: {method: op.to_openapi() for method, op in ops.items()}
                for path, ops in self.paths.items()
            },
            "components": {"securitySchemes": dict(self.security_schemes)},
        }
