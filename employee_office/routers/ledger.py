from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from employee_office.services.dispatcher import Dispatcher, InvokeResult

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _get_dispatcher(request: Request) -> Dispatcher:
    dispatcher = getattr(getattr(request.app, "state", None), "dispatcher", None)
    if not dispatcher:
        raise RuntimeError("Dispatcher nao configurado")
    return dispatcher


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse({"ok": False, "error": "invalid_request", "message": message}, status_code=400)


def _error_response(result: InvokeResult) -> JSONResponse:
    return JSONResponse({"ok": False, "error": result.code, "message": result.message}, status_code=result.status_code)


@router.get("/health")
def health():
    return {"ok": True}


@router.post("/invoke")
def invoke(payload: dict, request: Request):
    function = payload.get("function")
    args = payload.get("args") or []
    if not isinstance(function, str) or not function:
        return _bad_request("'function' must be a non-empty string")
    if not isinstance(args, list) or not all(isinstance(arg, str) for arg in args):
        return _bad_request("'args' must be a list of strings")
    result = _get_dispatcher(request).invoke(function, args)
    if not result.ok:
        return _error_response(result)
    return Response(content=result.payload, media_type="application/json")
