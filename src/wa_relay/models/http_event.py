from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpEvent(BaseModel):
    """
    An HTTP request as handed to the inbound relay.

    Accepts API Gateway proxy field names (httpMethod, queryStringParameters,
    body) as well as the snake_case attribute names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    http_method: str = Field(..., alias="httpMethod")
    query_string_parameters: Dict[str, str] = Field(
        default_factory=dict, alias="queryStringParameters"
    )
    # Raw JSON text, or whatever the caller already decoded it into
    body: Any = None

    @field_validator("http_method")
    @classmethod
    def normalize_method(cls, value: str) -> str:
        return value.upper()

    @field_validator("query_string_parameters", mode="before")
    @classmethod
    def default_params(cls, value: Optional[Dict[str, str]]) -> Dict[str, str]:
        # API Gateway sends null when the request has no query string
        return value or {}

    @property
    def has_body(self) -> bool:
        return self.body is not None and self.body not in ("", b"")


class HttpResponse(BaseModel):
    status_code: int
    body: str

    @classmethod
    def ok(cls) -> "HttpResponse":
        return cls(status_code=200, body="ok")

    @classmethod
    def challenge(cls, value: str) -> "HttpResponse":
        return cls(status_code=200, body=value)

    @classmethod
    def verification_failed(cls) -> "HttpResponse":
        return cls(status_code=403, body="Verification failed")

    @classmethod
    def bad_request(cls) -> "HttpResponse":
        return cls(status_code=400, body="Bad Request")

    @classmethod
    def error(cls) -> "HttpResponse":
        return cls(status_code=500, body="error")

    def to_lambda(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}
