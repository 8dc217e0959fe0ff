import logging
import uuid

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, get_settings
from .digits import check_digits
from .errors import OrderKeyError
from .keys import generate_key_between, generate_n_keys_between
from .schemas import (
    ErrorEnvelope,
    Health,
    KeyBetweenIn,
    KeyOut,
    KeysBetweenIn,
    KeysOut,
    KeyValidateIn,
    KeyValidateOut,
    Version,
)
from .validation import validate_order_key

logger = logging.getLogger(__name__)

app = FastAPI(title="Order Key API", version=__version__)


@app.exception_handler(OrderKeyError)
async def order_key_error_handler(request: Request, exc: OrderKeyError) -> JSONResponse:
    logger.info("rejected %s %s: %s", request.method, request.url.path, exc.message)
    body = ErrorEnvelope(
        code=exc.code,
        message=exc.message,
        details=exc.context,
        requestId=str(uuid.uuid4()),
    )
    return JSONResponse(status_code=422, content=body.model_dump())


# === Helpers ===


def resolve_digits(digits: str | None, settings: Settings) -> str:
    return check_digits(digits) if digits is not None else settings.digits


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version(version=__version__)


# === Key endpoints ===


@app.post("/v1/keys:between", response_model=KeyOut)
def key_between(payload: KeyBetweenIn, settings: Settings = Depends(get_settings)):
    digits = resolve_digits(payload.digits, settings)
    return KeyOut(key=generate_key_between(payload.before, payload.after, digits))


@app.post("/v1/keys:batch", response_model=KeysOut)
def keys_between(payload: KeysBetweenIn, settings: Settings = Depends(get_settings)):
    if payload.count > settings.max_batch:
        raise HTTPException(status_code=422, detail="count_exceeds_max_batch")
    digits = resolve_digits(payload.digits, settings)
    keys = generate_n_keys_between(payload.before, payload.after, payload.count, digits)
    return KeysOut(keys=keys)


@app.post("/v1/keys:validate", response_model=KeyValidateOut)
def validate_key(payload: KeyValidateIn, settings: Settings = Depends(get_settings)):
    digits = resolve_digits(payload.digits, settings)
    try:
        validate_order_key(payload.key, digits)
    except OrderKeyError as exc:
        return KeyValidateOut(key=payload.key, valid=False, error=exc.code)
    return KeyValidateOut(key=payload.key, valid=True)
