import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse

from subscribe_api.config import Settings, get_settings
from subscribe_api.errors import SubscribeError, UnexpectedError, ValidationError
from subscribe_api.metrics import get_metrics_text, CONTENT_TYPE_LATEST, SUBSCRIBE_REQUESTS
from subscribe_api.models.schema import SubscriptionRequest, SubscriptionResult, SubscribeOk, SubscribeErr
from subscribe_api.services import mailerlite
from subscribe_api.utils.cors_utils import (
    parse_allowed_origins, pick_cors_origin, origin_headers, preflight_headers
)
from subscribe_api.utils.email_utils import is_valid_email
from subscribe_api.utils.http_utils import loads_strict

logger = logging.getLogger(__name__)

router = APIRouter()

def _cors_origin(request: Request, settings: Settings) -> str:
    allow_list = parse_allowed_origins(settings.cors_allow_origin)
    return pick_cors_origin(request.headers.get("origin", ""), allow_list)

def cors_json(result: SubscriptionResult, status: int, origin: str) -> JSONResponse:
    body = result.to_body() if isinstance(result, SubscribeErr) else result.model_dump()
    headers = {"Cache-Control": "no-store", **origin_headers(origin)}
    return JSONResponse(body, status_code=status, headers=headers)

async def _read_json(request: Request):
    raw = await request.body()
    try:
        return loads_strict(raw) if raw else {}
    except (ValueError, RecursionError):
        return {}

@router.options("/subscribe")
def subscribe_preflight(request: Request, settings: Settings = Depends(get_settings)):
    origin = _cors_origin(request, settings)
    return Response(status_code=204, headers=preflight_headers(origin))

@router.post("/subscribe")
async def subscribe(request: Request, settings: Settings = Depends(get_settings)):
    origin = _cors_origin(request, settings)
    try:
        mailerlite.require_api_key(settings)

        sub = SubscriptionRequest.from_payload(await _read_json(request))
        if not is_valid_email(sub.email):
            logger.info("Rejected subscribe request with invalid email")
            raise ValidationError()

        await run_in_threadpool(mailerlite.upsert_subscriber, settings, sub)
    except SubscribeError as e:
        SUBSCRIBE_REQUESTS.labels(e.outcome).inc()
        return cors_json(e.to_result(), e.status_code, origin)
    except Exception:
        logger.exception("Subscribe failed")
        SUBSCRIBE_REQUESTS.labels("server_error").inc()
        err = UnexpectedError()
        return cors_json(err.to_result(), err.status_code, origin)

    logger.info("Subscribed address at %s", sub.email.rsplit("@", 1)[-1])
    SUBSCRIBE_REQUESTS.labels("ok").inc()
    return cors_json(SubscribeOk(), 200, origin)

@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "configured": bool(settings.mailerlite_api_key)}

@router.get("/metrics")
def metrics():
    data = get_metrics_text()  # bytes
    return PlainTextResponse(data, media_type=CONTENT_TYPE_LATEST)

@router.get("/")
def root():
    return {
        "app": "Subscribe API (FastAPI)",
        "endpoints": {
            "OPTIONS /subscribe": "CORS pre-flight",
            "POST /subscribe": "add an email to the mailing list",
            "GET /health": "health check",
            "GET /metrics": "Prometheus metrics",
        },
    }
