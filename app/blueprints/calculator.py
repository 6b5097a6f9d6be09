"""
Calculator blueprint for savings projections and scenario comparisons.

This module provides the API endpoints behind the calculator form: a single
projection and a side-by-side comparison of two scenarios.
"""

from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from app.config import get_global_settings
from app.models.requests import ComparisonRequest, ProjectionRequest
from app.services.calculator_service import CalculatorService

calculator_bp = Blueprint("calculator", __name__, url_prefix="/api")


def _get_service() -> CalculatorService:
    settings = get_global_settings()
    return CalculatorService(
        default_currency=settings.default_currency,
        real_value_basis=settings.real_value_basis,
    )


def _validation_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "request",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _read_json() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


@calculator_bp.route("/projections", methods=["POST"])
def create_projection() -> Any:
    """Project a single savings scenario.

    Returns:
        JSON response with summary, yearly table and chart data
    """
    try:
        payload = ProjectionRequest.model_validate(_read_json())
        return jsonify(_get_service().build_projection(payload)), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid input", "details": _validation_errors(e)}), 400

    except ValueError as e:
        return jsonify({"error": "Invalid input", "message": str(e)}), 400

    except Exception as e:
        current_app.logger.error(f"Error running projection: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@calculator_bp.route("/comparisons", methods=["POST"])
def create_comparison() -> Any:
    """Compare two savings scenarios.

    Returns:
        JSON response with both summaries, the winner and aligned chart data
    """
    try:
        payload = ComparisonRequest.model_validate(_read_json())
        return jsonify(_get_service().build_comparison(payload)), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid input", "details": _validation_errors(e)}), 400

    except ValueError as e:
        return jsonify({"error": "Invalid input", "message": str(e)}), 400

    except Exception as e:
        current_app.logger.error(f"Error running comparison: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
