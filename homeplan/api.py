"""HTTP API for HomePlan.

Stateless Flask app over the planning engine. Nothing is persisted; each
request carries its own inputs and optional rate overrides.

Endpoints:
- GET  /                          service banner
- GET  /api/health                health check
- GET  /api/default-config        default rate table
- POST /api/plan                  full project plan
- POST /api/timeline-compression  compression what-if against the plan cost
- POST /api/ai-plan               advisory free-text plan (may be null)
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from homeplan import __version__
from homeplan.config.errors import ErrorCode, HomePlanError, ValidationError
from homeplan.config.settings import settings
from homeplan.models.project import DEFAULT_COST_CONFIG
from homeplan.services.planner import plan_project, simulate_plan_compression
from homeplan.services.text_generation_service import TextGenerationService
from homeplan.validators.input_validator import (
    parse_compression_request,
    parse_project_inputs,
)

logger = structlog.get_logger(__name__)

# ============================================================================
# Helper Functions
# ============================================================================

ERROR_STATUS: Dict[str, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_FIELD: 400,
    ErrorCode.CONFIGURATION_MISSING: 400,
    ErrorCode.DEGENERATE_SCHEDULE: 422,
    ErrorCode.DIVISION_BY_ZERO: 422,
    ErrorCode.TEXT_GENERATION_ERROR: 502,
    ErrorCode.TEXT_GENERATION_TIMEOUT: 504,
}


def success_response(data: Any, status: int = 200):
    """Build success response."""
    return jsonify({"success": True, "data": data}), status


def error_response(code: str, message: str, details: Optional[Dict[str, Any]] = None, status: int = 500):
    """Build error response."""
    return jsonify({
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or {}
        }
    }), status


def get_request_json() -> Dict[str, Any]:
    """Extract a JSON object from the request body.

    Raises:
        ValidationError: If the body is not a JSON object.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(message="Request body must be a JSON object")
    return data


# ============================================================================
# App Factory
# ============================================================================


def create_app(text_service: Optional[TextGenerationService] = None) -> Flask:
    """Create the Flask app.

    Args:
        text_service: Text generation client (default built from settings).
    """
    app = Flask(__name__)
    CORS(app, origins=settings.cors_origin)
    app.extensions["text_generation_service"] = text_service or TextGenerationService()

    @app.errorhandler(HomePlanError)
    def handle_homeplan_error(error: HomePlanError):
        status = ERROR_STATUS.get(error.code, 500)
        logger.warning(
            "request_failed",
            path=request.path,
            code=error.code,
            error=error.message,
            status=status,
        )
        return error_response(error.code, error.message, error.details, status=status)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        # 404 -> NOT_FOUND, 405 -> METHOD_NOT_ALLOWED
        code = error.name.upper().replace(" ", "_")
        return error_response(
            code,
            error.name,
            {"path": request.path, "method": request.method},
            status=error.code,
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception("request_exception", path=request.path, error=str(error))
        return error_response(
            ErrorCode.INTERNAL_ERROR,
            "Internal server error",
            {"path": request.path},
            status=500,
        )

    @app.before_request
    def log_request():
        logger.info("request_received", method=request.method, path=request.path)

    @app.get("/")
    def index():
        return jsonify({
            "message": "HomePlan Construction Planning API",
            "version": __version__,
            "status": "running",
        })

    @app.get("/api/health")
    def health():
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    @app.get("/api/default-config")
    def default_config():
        return success_response(DEFAULT_COST_CONFIG.to_dict())

    @app.post("/api/plan")
    def create_plan():
        data = get_request_json()
        inputs = parse_project_inputs(data)
        plan = plan_project(inputs, data.get("config"))
        return success_response(plan.to_dict())

    @app.post("/api/timeline-compression")
    def timeline_compression():
        data = get_request_json()
        inputs = parse_project_inputs(data)
        new_timeline = parse_compression_request(data, inputs.project_timeline)
        plan = plan_project(inputs, data.get("config"))
        result = simulate_plan_compression(plan, new_timeline)
        return success_response(result.to_dict())

    @app.post("/api/ai-plan")
    def ai_plan():
        data = get_request_json()
        inputs = parse_project_inputs(data)
        service: TextGenerationService = app.extensions["text_generation_service"]
        text = asyncio.run(
            service.generate_plan_narrative(
                inputs.built_up_area,
                inputs.number_of_floors,
                inputs.project_timeline,
            )
        )
        return success_response({"plan": text})

    return app
