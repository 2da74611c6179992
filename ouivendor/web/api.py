from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Union

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ouivendor.log import get_logger
from ouivendor.lookup import VendorLookup, mac_to_bytes, parse_oui

logger = get_logger("api")

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="ouivendor", docs_url="/docs", redoc_url="/redoc")

_start_time = time.monotonic()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.monotonic()
    response = await call_next(request)
    elapsed = (time.monotonic() - start) * 1000
    logger.info("%s %s %d (%.1fms)", request.method, request.url.path,
                response.status_code, elapsed)
    return response

# ---------------------------------------------------------------------------
# Vendor table
# ---------------------------------------------------------------------------

_lookup: Optional[VendorLookup] = None


def configure(path: Union[str, Path]) -> VendorLookup:
    """Load the vendor table served by every route. Call before serving."""
    global _lookup
    _lookup = VendorLookup.from_file(path)
    return _lookup


def get_lookup() -> VendorLookup:
    if _lookup is None:
        raise HTTPException(status_code=503, detail="Vendor table not loaded")
    return _lookup

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str
    ouis: int
    vendors: int
    uptime_seconds: int


class VendorResponse(BaseModel):
    key: str
    oui: str
    vendor: str


class MacVendorResponse(BaseModel):
    mac: str
    vendor: str
    label: str

# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/api/v1/health", response_model=HealthResponse)
def health(lookup: VendorLookup = Depends(get_lookup)):
    return HealthResponse(
        status="ok",
        ouis=len(lookup),
        vendors=lookup.vendor_count,
        uptime_seconds=int(time.monotonic() - _start_time),
    )


@app.get("/api/v1/vendor/{key}", response_model=VendorResponse)
def get_vendor(key: str, lookup: VendorLookup = Depends(get_lookup)):
    oui = parse_oui(key)
    vendor = lookup.vendor(key)
    if oui is None or not vendor:
        raise HTTPException(status_code=404, detail="Vendor not found")
    return VendorResponse(key=key, oui=oui, vendor=vendor)


@app.get("/api/v1/mac/{mac}", response_model=MacVendorResponse)
def get_mac_vendor(mac: str, lookup: VendorLookup = Depends(get_lookup)):
    try:
        addr = mac_to_bytes(mac)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    vendor = lookup.vendor_from_mac(addr)
    if not vendor:
        raise HTTPException(status_code=404, detail="Vendor not found")
    return MacVendorResponse(mac=mac, vendor=vendor, label=lookup.vendor_with_mac(addr))
