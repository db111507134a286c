# HTML-сторінки калькулятора (Jinja2)

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse

from api.deps import get_optional_user
from core.templates import render
from models.pricing import TaxRate
from models.user import UserIdentity
from services import pricing_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Web"])


def _unauthorized_page() -> HTMLResponse:
    return HTMLResponse(render("unauthorized.html"), status_code=status.HTTP_401_UNAUTHORIZED)


def _calculator_page(user: UserIdentity, form: dict, result=None, error: str | None = None) -> HTMLResponse:
    selected = TaxRate(form["tax_rate"])
    return HTMLResponse(render(
        "calculator.html",
        user=user,
        form=form,
        tax_rates=list(TaxRate),
        tax_percent=selected.percent,
        result=result,
        error=error,
    ))


@router.get("/", response_class=HTMLResponse)
def calculator_form(user: UserIdentity | None = Depends(get_optional_user)):
    if user is None:
        return _unauthorized_page()
    form = {"amount": "", "quantity": "1", "margin": "", "tax_rate": TaxRate.NONE.value}
    return _calculator_page(user, form)


@router.post("/calculate", response_class=HTMLResponse)
def calculator_submit(
    amount: str = Form(""),
    quantity: str = Form(""),
    margin: str = Form(""),
    tax_rate: TaxRate = Form(TaxRate.NONE),
    user: UserIdentity | None = Depends(get_optional_user),
):
    if user is None:
        return _unauthorized_page()

    form = {
        "amount": pricing_service.clean_decimal_string(amount, pricing_service.AMOUNT_DECIMALS),
        "quantity": quantity,
        "margin": pricing_service.clean_decimal_string(margin, pricing_service.MARGIN_DECIMALS),
        "tax_rate": tax_rate.value,
    }
    data = pricing_service.parse_calculation_input(amount, quantity, margin, tax_rate)
    try:
        result = pricing_service.calculate(data)
    except pricing_service.PricingValidationError as e:
        logger.info(f"Pricing rejected for {user.uid}: {e.code.value}")
        return _calculator_page(user, form, error=e.message)
    return _calculator_page(user, form, result=result)
