"""Axiom API 로깅 미들웨어.

Axiom API logging middleware — the service's request log channel.
Every API call is sent to Axiom as one structured event:
    entity, method, path, path/query params, request body, status code,
    error detail (404 / 400 invalid reference / 409 duplicate / 500), duration.
Personal data (employee phone numbers) and credentials are masked.
When Axiom is not configured the middleware is a pass-through.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(tel|phone|password|secret|token|authorization|api_key|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 엔티티 추출 패턴 — "/api/v1/assets/3" -> "assets"
_ENTITY_PATTERN = re.compile(r"^/api/v\d+/([^/]+)")


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def entity_from_path(path: str) -> str | None:
    """요청 경로에서 엔티티 이름을 추출합니다.

    Extract the entity segment (``assets``, ``asset-employees`` ...) from an API path.
    """
    match = _ENTITY_PATTERN.match(path)
    return match.group(1) if match else None


def build_log_event(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    query_params: dict[str, Any] | None = None,
    request_body: Any = None,
    error_detail: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트를 구성합니다.

    Build the structured event sent to Axiom for one request.
    Optional keys are only present when they carry a value.
    """
    log_event: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }

    entity: str | None = entity_from_path(path)
    if entity:
        log_event["entity"] = entity
    if query_params:
        log_event["query_params"] = mask_sensitive(query_params)
    if request_body is not None:
        log_event["request_body"] = mask_sensitive(request_body)
    if error_detail:
        log_event["error"] = error_detail[:500]
    return log_event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        """JSON 요청 본문을 읽습니다 (Read a JSON request body, if any)."""
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes: bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return json.loads(body_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정 시 패스스루 — Pass through when skipped or unconfigured
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        request_body: Any = await self._read_body(request)
        query_params = dict(request.query_params) if request.query_params else None

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

                try:
                    error_detail = str(json.loads(resp_body).get("detail"))
                except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
                    error_detail = resp_body.decode("utf-8", errors="replace")

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event = build_log_event(
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                query_params=query_params,
                request_body=request_body,
                error_detail=error_detail,
            )
            try:
                # 블로킹 HTTP 호출 — Blocking HTTP call, kept off the event loop
                await run_in_threadpool(
                    self._client.ingest_events, self._dataset, [log_event]
                )
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
