"""FastAPI surface for the gateway.

Routes:
    GET  /api/health   liveness probe
    POST /api/analyze  ``{text}`` -> ``{results}`` | ``{error}``
    POST /api/chat     normalized chat request -> normalized response

``/api/chat`` maps gateway failures to ``{error, code}`` with status 400
for validation and configuration problems, the provider's status for 4xx
provider replies, 504 for timeouts and 502 for everything upstream.
``/api/analyze`` always answers 200; failures travel in ``{error}`` like the
original message contract.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..base.errors import ErrorCode, GatewayError, ProviderHttpError
from ..base.models import ChatRequest, Message
from ..config.defaults import SERVICE_CORS_DEFAULT_ORIGINS
from ..gateway import ProviderGateway, default_gateway
from .analyzer import handle_analyze


class MessageBody(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = Field(None, alias="toolCalls")

    model_config = ConfigDict(populate_by_name=True)


class ChatBody(BaseModel):
    """Inbound chat request; camelCase names are accepted as aliases.

    Fields are optional so the gateway validator reports what is missing.
    """

    model_config = ConfigDict(populate_by_name=True)

    provider: Optional[str] = None
    api_key: Optional[str] = Field(None, alias="apiKey")
    model_id: Optional[str] = Field(None, alias="modelId")
    messages: List[MessageBody] = Field(default_factory=list)
    response_type: Optional[str] = Field(None, alias="responseType")
    response_schema: Optional[Dict[str, Any]] = Field(None, alias="responseSchema")
    custom_url: Optional[str] = Field(None, alias="customUrl")
    tools: Optional[List[Dict[str, Any]]] = None
    stream: bool = False

    def to_request(self) -> ChatRequest:
        return ChatRequest(
            provider=self.provider,
            api_key=self.api_key,
            model_id=self.model_id,
            messages=[
                Message(role=m.role, content=m.content, tool_calls=m.tool_calls)  # type: ignore[arg-type]
                for m in self.messages
            ],
            response_type=self.response_type,
            response_schema=self.response_schema,
            custom_url=self.custom_url,
            tools=self.tools,
            stream=self.stream,
        )


class AnalyzeBody(BaseModel):
    text: Optional[str] = None


_CLIENT_ERROR_CODES = {ErrorCode.VALIDATION, ErrorCode.UNSUPPORTED, ErrorCode.CONFIG}


def status_for_error(exc: GatewayError) -> int:
    """Return the HTTP status the service answers with for ``exc``."""
    if exc.code in _CLIENT_ERROR_CODES and not isinstance(exc, ProviderHttpError):
        return 400
    if isinstance(exc, ProviderHttpError) and 400 <= exc.status < 500:
        return exc.status
    if exc.code == ErrorCode.TIMEOUT:
        return 504
    return 502


def get_gateway() -> ProviderGateway:
    """FastAPI dependency returning the process gateway."""
    return default_gateway()


app = FastAPI(title="Provider Gateway", version="0.1.0")

cors_origins_env = os.getenv("GATEWAY_SERVICE_CORS_ORIGINS", SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, Any]:
    return {"ok": True}


@app.post("/api/analyze")
def analyze(body: AnalyzeBody, gateway: ProviderGateway = Depends(get_gateway)) -> Dict[str, Any]:
    """Analyze a post with the configured provider."""
    return handle_analyze({"text": body.text}, gateway=gateway)


@app.post("/api/chat")
def chat(body: ChatBody, gateway: ProviderGateway = Depends(get_gateway)):
    """Run one chat call and return the normalized response."""
    try:
        response = gateway.chat(body.to_request())
    except GatewayError as exc:
        return JSONResponse(
            status_code=status_for_error(exc),
            content={"error": exc.message, "code": exc.code.value},
        )
    return response.to_dict()


__all__ = ["app", "get_gateway", "status_for_error", "ChatBody", "AnalyzeBody"]
