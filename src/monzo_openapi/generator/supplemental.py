"""Endpoints that exist in the API but have no `$ http` example in the docs."""

import logging

from monzo_openapi.generator.paths import default_responses, operation_id_for, path_parameters, security_for
from monzo_openapi.parser.base import Document, Operation, Tag

logger = logging.getLogger(__name__)

# (method, path, tag, summary)
MISSING_ENDPOINTS = [
    ("GET", "/ping/whoami", "Authentication", "Who am I"),
    ("POST", "/oauth2/logout", "Authentication", "Log out"),
    ("POST", "/attachment/upload", "Attachments", "Upload attachment"),
    ("POST", "/attachment/register", "Attachments", "Register attachment"),
    ("POST", "/attachment/deregister", "Attachments", "Deregister attachment"),
    ("GET", "/webhooks", "Webhooks", "List webhooks"),
    ("POST", "/webhooks", "Webhooks", "Register webhook"),
    ("DELETE", "/webhooks/{webhook_id}", "Webhooks", "Delete webhook"),
    ("GET", "/open-banking/accounts", "Open Banking", "List Open Banking accounts"),
]


def inject_missing(doc: Document) -> Document:
    """Add the known example-less endpoints without touching anything already present."""
    for method, path, tag, summary in MISSING_ENDPOINTS:
        operation = Operation(
            operation_id=operation_id_for(method, path),
            summary=summary,
            tags=[tag],
            parameters=path_parameters(path),
            responses=default_responses(),
            security=security_for(path),
        )
        if not doc.add_operation(path, method, operation, overwrite=False):
            logger.debug("Keeping documented %s %s over the built-in entry", method, path)
            continue
        if not doc.has_tag(tag):
            doc.add_tag(Tag(name=tag))
    return doc
