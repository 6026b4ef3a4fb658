"""HTTP / Microsoft 365 Constants"""
from enum import Enum, IntEnum


class HttpMethod(str, Enum):
    """HTTP メソッド"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"


class HttpStatus(IntEnum):
    """HTTP ステータスコード"""
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class ContentType(str, Enum):
    """Content-Type"""
    JSON = "application/json"
    TEXT = "text/plain"


# HTTP ヘッダー
CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "Bearer"

# CORS ヘッダー
ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
MAX_AGE = "Access-Control-Max-Age"

CORS_ALLOWED_HEADERS = "Content-Type,Authorization,X-Amz-Date,X-Api-Key,X-Amz-Security-Token"
CORS_MAX_AGE_SECONDS = 86400  # 24時間

# Microsoft Graph API
GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"
GRAPH_ME_ENDPOINT = "/me"
GRAPH_USERS_ENDPOINT = "/users"

# SharePoint REST API
SHAREPOINT_REST_ENDPOINT = "/_api"
