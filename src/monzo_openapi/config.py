"""Fixed settings for the generated Monzo OpenAPI document."""

API_BASE_URL = "https://api.monzo.com"

OPENAPI_VERSION = "3.1.0"
API_TITLE = "Monzo API"
API_VERSION = "1.0.0"
API_DESCRIPTION = (
    "The Monzo API, generated from the public Markdown documentation. "
    "Request examples come from the documented `http` invocations."
)

AUTHORIZATION_URL = "https://auth.monzo.com/"
TOKEN_URL = "https://api.monzo.com/oauth2/token"

DESCRIPTION_MAX_CHARS = 300
UNCATEGORIZED_TAG = "Uncategorized"

YAML_LINE_WIDTH = 100
