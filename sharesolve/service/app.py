"""ShareSolve FastAPI application.

Endpoints:
- POST /decode       – decode one (x, base, value) entry to a point
- POST /reconstruct  – interpolate f(0) from explicit points
- POST /solve        – load a share-set document, select K shares, reconstruct
- GET  /audit        – dump the audit chain
- GET  /audit/{d}    – solve history of the share set with digest d

Integers travel as decimal strings so clients without big-int JSON support
keep full precision.  Every ``ShareError`` becomes HTTP 422 with the error
kind and its context.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictInt, StrictStr

from sharesolve.codec.radix import decode_share, parse_identifier, parse_value
from sharesolve.config import LOG_LEVEL
from sharesolve.crypto.lagrange import reconstruct as lagrange_reconstruct
from sharesolve.errors import ShareError
from sharesolve.loader.shareset import load_shareset
from sharesolve.service.audit import AuditLog

logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL.upper())

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

app = FastAPI(title="ShareSolve")

_audit = AuditLog()

# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class DecodeRequest(BaseModel):
    x: Union[StrictStr, StrictInt]
    base: Union[StrictStr, StrictInt]
    value: StrictStr


class PointModel(BaseModel):
    x: Union[StrictStr, StrictInt]
    y: Union[StrictStr, StrictInt]


class ReconstructRequest(BaseModel):
    points: List[PointModel]


class SolveRequest(BaseModel):
    document: Dict[str, Any]


class AuditResponse(BaseModel):
    entries: List[Dict[str, Any]]
    chain_valid: bool


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


@app.exception_handler(ShareError)
async def share_error_handler(request: Request, exc: ShareError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.kind)
    _audit.record_reject(request.url.path, exc)
    return JSONResponse(status_code=422, content=exc.to_dict())


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.post("/decode")
async def decode(req: DecodeRequest):
    """Decode a single share entry."""
    share = decode_share(req.x, req.base, req.value)
    return {"x": str(share.x), "y": str(share.y)}


@app.post("/reconstruct")
async def reconstruct(req: ReconstructRequest):
    """Interpolate f(0) from the given points, in the order given."""
    points = [(parse_identifier(p.x), parse_value(p.y)) for p in req.points]
    secret = lagrange_reconstruct(points)
    _audit.record_reconstruct(points)
    logger.info("reconstructed secret from %d points", len(points))
    return {"secret": str(secret)}


@app.post("/solve")
async def solve(req: SolveRequest):
    """Load a share-set document and reconstruct from its first K shares by x."""
    shareset = load_shareset(req.document)
    selected = shareset.select()
    secret = lagrange_reconstruct(selected)
    seen_before = _audit.was_solved(shareset)
    entry = _audit.record_solve(shareset, [s.x for s in selected])
    digest = entry.data["digest"]
    logger.info("solved share set %s… with k=%d", digest[:12], shareset.threshold)
    return {
        "secret": str(secret),
        "threshold": shareset.threshold,
        "used": entry.data["used"],
        "digest": digest,
        "seen_before": seen_before,
    }


@app.get("/audit")
async def audit() -> AuditResponse:
    return AuditResponse(entries=_audit.entries(), chain_valid=_audit.verify_chain())


@app.get("/audit/{digest}")
async def audit_history(digest: str):
    """Solve history of one share set, by its digest."""
    history = _audit.history(digest)
    if not history:
        raise HTTPException(404, "No solves recorded for this share set")
    return {"digest": digest, "entries": history}
