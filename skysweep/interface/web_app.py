"""Mini README: FastAPI-powered planning API for Skysweep.

Structure:
    * create_application - application factory wiring the JSON routes.

The API exposes the planner and validator to map front ends: list the
available patterns, plan a route for a drawn polygon, validate an existing
path, or do both in one request. Settings supply defaults for fields a
request omits; the planner and validator themselves only see explicit
arguments.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import SkysweepSettings, get_settings
from ..geometry import path_length_km
from ..logging_utils import get_logger
from ..missions import assess_mission
from ..route_planning import REGISTRY, CoveragePlanner
from ..validation import validate_path
from .schemas import AssessRequest, PlanRequest, ValidateRequest, battery_policy_from

LOGGER = get_logger(__name__)


def create_application(settings: Optional[SkysweepSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    app = FastAPI(
        title="Skysweep Survey Planner",
        version="0.3.0",
        debug=not settings.is_production,
    )
    planner = CoveragePlanner()
    policy = battery_policy_from(settings)

    @app.get("/patterns")
    async def patterns() -> JSONResponse:
        """List the registered scan patterns with display names."""

        payload = [
            {"pattern": pattern.value, "name": pattern.display_name}
            for pattern in REGISTRY.available_patterns()
        ]
        return JSONResponse({"patterns": payload})

    @app.post("/plan-route")
    async def plan_route(request: PlanRequest) -> JSONResponse:
        """Return a generated coverage path for the supplied polygon."""

        try:
            result = planner.generate(request.polygon, request.config.to_config(settings))
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Generated route with %s waypoints", result.num_waypoints)
        payload = result.as_dict()
        payload["flightPath"] = result.to_geojson()
        return JSONResponse(payload)

    @app.post("/validate-path")
    async def validate(request: ValidateRequest) -> JSONResponse:
        """Validate an existing path against zones, range and battery."""

        try:
            zones = [zone.to_zone() for zone in request.no_fly_zones]
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        distance = request.distance_km
        if distance is None:
            distance = path_length_km(request.waypoints)
        vehicle = request.vehicle.to_capability() if request.vehicle else None
        result = validate_path(request.waypoints, distance, vehicle, zones, policy)
        return JSONResponse(result.as_dict())

    @app.post("/assess-mission")
    async def assess(request: AssessRequest) -> JSONResponse:
        """Plan a route and validate it in a single call."""

        try:
            zones = [zone.to_zone() for zone in request.no_fly_zones]
            assessment = assess_mission(
                request.polygon,
                request.config.to_config(settings),
                request.vehicle.to_capability() if request.vehicle else None,
                zones,
                policy=policy,
                planner=planner,
            )
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.debug("Assessment valid=%s", assessment.ready)
        return JSONResponse(assessment.as_dict())

    return app
