# Pydantic моделі для калькулятора ціни (markup)

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict


class TaxRate(str, Enum):
    NONE = "none"
    EXEMPT = "0"
    REDUCED = "10"
    STANDARD = "22"

    @property
    def percent(self) -> int:
        return 0 if self is TaxRate.NONE else int(self.value)

    @property
    def label(self) -> str:
        return TAX_RATE_LABELS[self]


TAX_RATE_LABELS = {
    TaxRate.NONE: "Sin IVA",
    TaxRate.EXEMPT: "Exento 0%",
    TaxRate.REDUCED: "Mínimo 10%",
    TaxRate.STANDARD: "Básico 22%",
}


class PricingErrorCode(str, Enum):
    AMOUNT_NOT_POSITIVE = "AMOUNT_NOT_POSITIVE"
    QUANTITY_NOT_POSITIVE = "QUANTITY_NOT_POSITIVE"
    MARGIN_OUT_OF_RANGE = "MARGIN_OUT_OF_RANGE"


ERROR_MESSAGES = {
    PricingErrorCode.AMOUNT_NOT_POSITIVE: "El importe debe ser mayor que 0",
    PricingErrorCode.QUANTITY_NOT_POSITIVE: "La cantidad debe ser mayor que 0",
    PricingErrorCode.MARGIN_OUT_OF_RANGE: "El margen debe estar entre 0% y 100% (exclusivo)",
}


class CalculationInput(BaseModel):
    # Діапазони перевіряє calculate(), не модель
    total_amount: Decimal
    quantity: int
    margin_percent: Decimal
    tax_rate: TaxRate = TaxRate.NONE


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit_cost: int
    profit: int
    selling_price: int
    selling_price_with_tax: int
    tax_amount: int


class PricingRequest(BaseModel):
    amount: str | float
    quantity: str | int = "1"
    margin: str | float
    tax_rate: TaxRate = TaxRate.NONE


class FormattedResult(BaseModel):
    unit_cost: str
    profit: str
    selling_price: str
    selling_price_with_tax: str
    tax_amount: str


class PricingResponse(CalculationResult):
    tax_percent: int
    formatted: FormattedResult


class PricingErrorDetail(BaseModel):
    code: PricingErrorCode
    message: str


class TaxRateOption(BaseModel):
    value: TaxRate
    label: str
    percent: int
