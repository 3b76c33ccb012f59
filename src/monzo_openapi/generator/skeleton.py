"""Base document builder."""

from monzo_openapi.config import (
    API_BASE_URL,
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    AUTHORIZATION_URL,
    OPENAPI_VERSION,
    TOKEN_URL,
)
from monzo_openapi.parser.base import Document


def build_skeleton() -> Document:
    """An empty but valid document: metadata, server and the two security schemes."""
    return Document(
        openapi=OPENAPI_VERSION,
        info={
            "title": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
        },
        servers=[{"url": API_BASE_URL, "description": "Production"}],
        security_schemes={
            "bearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "Access token obtained through the OAuth 2.0 flow.",
            },
            "openBankingAuth": {
                "type": "oauth2",
                "description": "Open Banking authorization for third-party providers.",
                "flows": {
                    "authorizationCode": {
                        "authorizationUrl": AUTHORIZATION_URL,
                        "tokenUrl": TOKEN_URL,
                        "scopes": {},
                    }
                },
            },
        },
    )
