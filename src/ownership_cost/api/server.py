"""FastAPI server — HTTP access to the ownership cost engine.

Run with:
    uvicorn ownership_cost.api.server:app --reload --port 8000

Or:
    ownership-cost-api

Endpoints:
    GET  /health                 — liveness
    GET  /schema                 — JSON Schema for facts + configuration
    GET  /defaults               — default configuration and constants
    POST /calculate              — normalized input + cost breakdown
    POST /calculate/schedules    — depreciation + loan amortization schedules
    POST /calculate/sensitivity  — one-at-a-time sweep → tornado data
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from ownership_cost.api.context import get_default_configuration, get_defaults, get_input_schema
from ownership_cost.config import LoanFinancing, OwnershipConfiguration, VehicleFacts
from ownership_cost.engine.depreciation import build_depreciation_schedule
from ownership_cost.engine.financing import build_amortization_schedule
from ownership_cost.engine.pipeline import estimate_costs
from ownership_cost.engine.sensitivity import run_sensitivity
from ownership_cost.models.inputs import NormalizedComputationInput
from ownership_cost.models.results import (
    AmortizationSchedule,
    CostBreakdown,
    DepreciationSchedule,
    SensitivityResult,
)

logger = logging.getLogger(__name__)

API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Vehicle Ownership Cost API",
    version=API_VERSION,
    description=(
        "Estimate the annual and monthly cost of owning a vehicle from listing "
        "facts and the owner's configuration: depreciation, fuel, tax, maintenance, "
        "tires, insurance, parking, care, and financing."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """A configuration merged inside an endpoint failed validation."""
    logger.info("Rejected %s: %d validation error(s)", request.url.path, exc.error_count())
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(include_url=False))},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. ``configuration`` may be partial."""
    facts: VehicleFacts
    configuration: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full OwnershipConfiguration JSON. Missing fields use defaults. "
                    "Example: {'annual_mileage': 2000, 'financing': {'mode': 'loan', 'loan_type': 'annuity'}}",
    )
    current_year: int | None = Field(
        default=None,
        description="Year used to compute vehicle age. None = today.",
    )


class SensitivityRequest(CalculateRequest):
    """Request body for /calculate/sensitivity."""
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'Mileage', 'path': 'configuration.annual_mileage', "
                    "'low_pct': -0.25, 'high_pct': 0.25}]",
    )


class CalculateResponse(BaseModel):
    input: NormalizedComputationInput
    breakdown: CostBreakdown


class SchedulesResponse(BaseModel):
    depreciation: DepreciationSchedule
    amortization: AmortizationSchedule | None = None
    """None for cash purchases and leases."""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_configuration(overrides: dict[str, Any]) -> OwnershipConfiguration:
    """Build a configuration from partial overrides merged onto defaults.

    A financing block with a different ``mode`` replaces the default block
    instead of merging into it, so cash defaults never leak into a loan.
    """
    defaults = get_default_configuration()
    financing = overrides.get("financing")
    if isinstance(financing, dict) and financing.get("mode", "cash") != defaults["financing"]["mode"]:
        defaults["financing"] = {}
    _deep_merge(defaults, overrides)
    return OwnershipConfiguration(**defaults)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — name, version, and where to start."""
    return {
        "name": "Vehicle Ownership Cost API",
        "version": API_VERSION,
        "start_here": "GET /defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for VehicleFacts and OwnershipConfiguration."""
    return get_input_schema()


@app.get("/defaults")
def get_default_values():
    """Default configuration and constants tables."""
    return get_defaults()


@app.post("/calculate", response_model=CalculateResponse)
def calculate_costs(req: CalculateRequest):
    """Assemble the inputs and return the full cost breakdown.

    Example minimal request:
    ```json
    {"facts": {"purchase_price": 300000, "fuel_type": "Bensin"}}
    ```
    """
    configuration = _build_configuration(req.configuration)
    inp, breakdown = estimate_costs(req.facts, configuration, current_year=req.current_year)
    logger.info(
        "Calculated %s/%s: %d per month",
        inp.fuel_type, inp.financing.mode, breakdown.monthly_total,
    )
    return CalculateResponse(input=inp, breakdown=breakdown)


@app.post("/calculate/schedules", response_model=SchedulesResponse)
def calculate_schedules(req: CalculateRequest):
    """Year-by-year depreciation and, for loans, the monthly amortization schedule."""
    configuration = _build_configuration(req.configuration)
    inp, _ = estimate_costs(req.facts, configuration, current_year=req.current_year)

    amortization = None
    if isinstance(inp.financing, LoanFinancing):
        amortization = build_amortization_schedule(inp.purchase_price, inp.financing)

    return SchedulesResponse(
        depreciation=build_depreciation_schedule(inp),
        amortization=amortization,
    )


@app.post("/calculate/sensitivity", response_model=SensitivityResult)
def calculate_sensitivity(req: SensitivityRequest):
    """Sweep key assumptions and rank them by effect on the monthly total."""
    configuration = _build_configuration(req.configuration)

    sweeps = None
    if req.sweep_params:
        sweeps = [
            (sp.get("name", sp["path"]), sp["path"], sp.get("low_pct", -0.15), sp.get("high_pct", 0.15))
            for sp in req.sweep_params
        ]

    return run_sensitivity(req.facts, configuration, sweeps, current_year=req.current_year)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "ownership_cost.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
