"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

import structlog
from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from fincore import __version__
from fincore.config import Settings
from fincore.core.settlement import compute_settlement
from fincore.core.valuation import summarize_portfolio, valuate_investment
from fincore.core.vault import (
    decide_vault_item,
    fund_vault_item,
    is_ready,
    summarize_vault,
    vault_progress,
)
from fincore.domain.errors import FinanceError
from fincore.schemas.investment import PortfolioRequest, ValuationRequest
from fincore.schemas.ping import PingResponse
from fincore.schemas.settlement import SettlementRequest
from fincore.schemas.vault import (
    DecisionRequest,
    FundRequest,
    FundResponse,
    VaultSummaryRequest,
)

logger = structlog.get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["FINCORE_SETTINGS"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _render(model: BaseModel) -> Any:
    return jsonify(model.model_dump(mode="json", by_alias=True))


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("request_rejected", path=request.path, errors=exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(FinanceError)
def _handle_finance_error(exc: FinanceError):
    """Engine precondition failures are the caller's data problem: 400."""
    logger.warning("engine_precondition_failed", path=request.path, code=exc.code, detail=exc.message)
    return jsonify(exc.to_dict()), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", service=_settings().app_name, version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/groups/settlement")
def settlement() -> Any:
    """Per-member balances and the transfers that settle a group."""
    payload = SettlementRequest.model_validate(_payload())
    settings = _settings()
    result = compute_settlement(
        payload.members,
        payload.expenses,
        tolerance=settings.settlement_tolerance,
        skip_non_positive=settings.skip_non_positive_expenses,
    )
    logger.info(
        "settlement_served",
        members=len(result.net_balance),
        transfers=len(result.transfers),
    )
    return _render(result)


@api_bp.post("/investments/valuation")
def investment_valuation() -> Any:
    payload = ValuationRequest.model_validate(_payload())
    result = valuate_investment(
        payload.investment,
        payload.evaluation_date,
        strict_horizon=_settings().strict_horizon,
    )
    return _render(result)


@api_bp.post("/investments/portfolio")
def investment_portfolio() -> Any:
    """Aggregate totals across all of a user's investments."""
    payload = PortfolioRequest.model_validate(_payload())
    summary = summarize_portfolio(
        payload.investments,
        payload.evaluation_date,
        strict_horizon=_settings().strict_horizon,
    )
    logger.info("portfolio_served", investments=summary.investment_count)
    return _render(summary)


@api_bp.post("/vault/fund")
def vault_fund() -> Any:
    payload = FundRequest.model_validate(_payload())
    item = fund_vault_item(
        payload.item,
        payload.amount,
        cap_at_target=_settings().vault_cap_at_target,
    )
    return _render(FundResponse(item=item, progress=vault_progress(item), ready=is_ready(item)))


@api_bp.post("/vault/summary")
def vault_summary() -> Any:
    payload = VaultSummaryRequest.model_validate(_payload())
    return _render(summarize_vault(payload.items))


@api_bp.post("/vault/decision")
def vault_decision() -> Any:
    """Close a vault item as bought, saved or invested."""
    payload = DecisionRequest.model_validate(_payload())
    outcome = decide_vault_item(payload.item, payload.decision)
    logger.info("vault_decision_served", decision=payload.decision.value)
    return _render(outcome)
