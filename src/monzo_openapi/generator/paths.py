"""Path templating, operationId naming and security classification.

Shared by the example processor and the supplemental endpoint injector so
both produce operations of the same shape.
"""

import re

from monzo_openapi.parser.base import Parameter

VARIABLE_RE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)")
PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
URL_RE = re.compile(r"^https?://(?P<host>[^/?#]*)(?P<path>[^?#]*)(?:\?(?P<query>[^#]*))?")

OPEN_BANKING_MARKER = "open-banking"


class MalformedExampleError(ValueError):
    """An `$ http` example whose URL or arguments cannot be turned into an operation."""


def templatize(value: str) -> str:
    """Replace `$name` variables with `{name}` placeholders."""
    return VARIABLE_RE.sub(r"{\1}", value)


def split_url(url: str) -> tuple[str, str]:
    """Split a documented URL into (path template, raw query string).

    Scheme and host are dropped; `$name` variables in the path become
    `{name}` placeholders.
    """
    match = URL_RE.match(url)
    if not match or not match.group("host"):
        raise MalformedExampleError(f"URL has no host: {url!r}")

    raw_path = match.group("path")
    if "$" in VARIABLE_RE.sub("", raw_path):
        raise MalformedExampleError(f"Dangling '$' in URL path: {url!r}")

    return templatize(raw_path) or "/", match.group("query") or ""


def path_parameters(path: str) -> list[Parameter]:
    """One required path parameter per `{name}` placeholder."""
    names = PLACEHOLDER_RE.findall(path)
    if len(names) != len(set(names)):
        raise MalformedExampleError(f"Repeated path variable in {path!r}")
    return [Parameter(name=name, location="path", required=True) for name in names]


def security_for(path: str) -> list[dict[str, list[str]]]:
    if OPEN_BANKING_MARKER in path:
        return [{"openBankingAuth": []}]
    return [{"bearerAuth": []}]


def operation_id_for(method: str, path: str) -> str:
    """Lower-camel id from method and path, e.g. `GET /balance` -> `getBalance`.

    Placeholder segments read as `By<Name>`: `/pots/{pot_id}` -> `PotsByPotId`.
    """
    words: list[str] = []
    for segment in path.strip("/").split("/"):
        placeholder = PLACEHOLDER_RE.fullmatch(segment)
        if placeholder:
            words.append("by")
            words.extend(placeholder.group(1).split("_"))
        else:
            words.extend(re.split(r"[^A-Za-z0-9]+", segment))
    return method.lower() + "".join(w[:1].upper() + w[1:] for w in words if w)


def default_responses() -> dict:
    return {
        "200": {
            "description": "Successful response",
            "content": {"application/json": {"schema": {"type": "object"}}},
        }
    }
