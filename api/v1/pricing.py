# API роутер для калькулятора ціни

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user
from models.pricing import (
    PricingErrorDetail,
    PricingRequest,
    PricingResponse,
    TaxRate,
    TaxRateOption,
)
from models.user import UserIdentity
from services import pricing_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/calculate",
    response_model=PricingResponse,
    responses={422: {"model": PricingErrorDetail}},
)
def calculate_price_endpoint(
    request: PricingRequest,
    current_user: UserIdentity = Depends(get_current_user),
):
    """
    Рахує собівартість одиниці, ціну продажу, прибуток та IVA.
    """
    data = pricing_service.parse_calculation_input(
        request.amount, request.quantity, request.margin, request.tax_rate
    )
    try:
        result = pricing_service.calculate(data)
    except pricing_service.PricingValidationError as e:
        logger.info(f"Pricing rejected for {current_user.uid}: {e.code.value}")
        raise HTTPException(
            status_code=422,
            detail=PricingErrorDetail(code=e.code, message=e.message).model_dump(mode="json"),
        )
    return pricing_service.build_response(result, data.tax_rate)


@router.get("/tax-rates", response_model=List[TaxRateOption])
def list_tax_rates(current_user: UserIdentity = Depends(get_current_user)):
    return [TaxRateOption(value=rate, label=rate.label, percent=rate.percent) for rate in TaxRate]
