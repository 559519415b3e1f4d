import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.errors import PaymentError, ValidationError
from schemas.scan import ScanRequest
from services.scan_service import ScanService

log = logging.getLogger("scan")

router = APIRouter(tags=["scan"])


def get_scan_service(request: Request) -> ScanService:
    return request.app.state.scan_service


@router.post("/scan")
async def scan(
    request: Request,
    body: Optional[ScanRequest] = None,
    service: ScanService = Depends(get_scan_service),
):
    """
    Verify payment (per configured proof source), then scan the wallet.
    400 missing address / 402 payment / 500 scan failure / 200 report.
    """
    body = body or ScanRequest()
    proof = service.proof_source.extract(request, body)

    try:
        data = await service.run(body.address, proof)
    except (ValidationError, PaymentError):
        # 400 / 402 are rendered by the app-level handler
        raise
    except Exception as e:
        log.exception("Scan failed for %s: %s", body.address, e)
        return JSONResponse(status_code=500, content={"error": "Scan failed", "details": str(e)})

    return JSONResponse(content=data)
