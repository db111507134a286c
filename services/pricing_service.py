# Сервісний шар для розрахунку ціни продажу (markup)

import logging
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

from core.config import settings
from models.pricing import (
    ERROR_MESSAGES,
    CalculationInput,
    CalculationResult,
    FormattedResult,
    PricingErrorCode,
    PricingResponse,
    TaxRate,
)

logger = logging.getLogger(__name__)

AMOUNT_DECIMALS = 2
MARGIN_DECIMALS = 2

_HUNDRED = Decimal("100")
_BASE_PRECISION = 28
_QUANTITY_RE = re.compile(r"\s*([+-]?\d+)")
_EXPONENT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)[eE][+-]?\d+")
_MAX_EXPONENT = 1000


class PricingValidationError(ValueError):
    """Вхідні дані не пройшли перевірку. Містить код помилки і повідомлення для UI."""

    def __init__(self, code: PricingErrorCode):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        super().__init__(self.message)


def _round_unit(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def price_breakdown(data: CalculationInput) -> dict[str, Decimal]:
    """
    Рахує ціну продажу за маржею від ціни продажу (не від собівартості):
    selling_price = unit_cost / (1 - margin).

    Перевірки йдуть по черзі, перша помилка перериває розрахунок.
    Повертає неокруглені значення.
    """
    if data.total_amount <= 0:
        raise PricingValidationError(PricingErrorCode.AMOUNT_NOT_POSITIVE)
    if data.quantity <= 0:
        raise PricingValidationError(PricingErrorCode.QUANTITY_NOT_POSITIVE)
    if not (0 < data.margin_percent < _HUNDRED):
        raise PricingValidationError(PricingErrorCode.MARGIN_OUT_OF_RANGE)

    # Точності має вистачити на цілу частину будь-якої суми
    with localcontext() as ctx:
        ctx.prec = max(_BASE_PRECISION, data.total_amount.adjusted() + _BASE_PRECISION)

        margin_fraction = data.margin_percent / _HUNDRED
        unit_cost = data.total_amount / data.quantity
        selling_price = unit_cost / (1 - margin_fraction)
        tax_rate_value = Decimal(data.tax_rate.percent) / _HUNDRED
        tax_amount = selling_price * tax_rate_value
        selling_price_with_tax = selling_price + tax_amount
        profit = selling_price - unit_cost

    return {
        "unit_cost": unit_cost,
        "profit": profit,
        "selling_price": selling_price,
        "selling_price_with_tax": selling_price_with_tax,
        "tax_amount": tax_amount,
    }


def calculate(data: CalculationInput) -> CalculationResult:
    """
    Кожне поле округлюється окремо, тому округлені значення можуть
    розходитися з формулами на 1.
    """
    breakdown = price_breakdown(data)
    result = CalculationResult(**{name: _round_unit(value) for name, value in breakdown.items()})
    logger.debug(f"Calculated {data!r} -> {result!r}")
    return result


def clean_decimal_string(raw: str | float | int | None, max_decimals: int) -> str:
    """
    Чистить рядок як поле вводу: лишає цифри, одну крапку і мінус на початку,
    обрізає дробову частину до max_decimals знаків.
    """
    text = "" if raw is None else str(raw).strip()
    if _EXPONENT_RE.fullmatch(text):
        # 1e+16, 1e-05: розгортаємо експоненту, інакше "e" і знак зникнуть нижче
        value = Decimal(text)
        text = format(value, "f") if abs(value.adjusted()) <= _MAX_EXPONENT else ""
    negative = text.startswith("-")
    cleaned = re.sub(r"[^\d.]", "", text)

    parts = cleaned.split(".")
    if len(parts) > 2:
        parts = [parts[0], "".join(parts[1:])]
    if len(parts) == 2 and len(parts[1]) > max_decimals:
        parts[1] = parts[1][:max_decimals]
    cleaned = ".".join(parts)

    return f"-{cleaned}" if negative and cleaned else cleaned


def parse_decimal(raw: str | float | int | None, max_decimals: int) -> Decimal:
    # Нечислове значення рахується як 0 і падає на перевірці > 0
    cleaned = clean_decimal_string(raw, max_decimals)
    if not re.search(r"\d", cleaned):
        return Decimal("0")
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    return Decimal(cleaned)


def parse_quantity(raw: str | int | None) -> int:
    match = _QUANTITY_RE.match("" if raw is None else str(raw))
    if not match:
        return 0
    return int(match.group(1))


def parse_calculation_input(
    amount: str | float | None,
    quantity: str | int | None,
    margin: str | float | None,
    tax_rate: TaxRate | str = TaxRate.NONE,
) -> CalculationInput:
    return CalculationInput(
        total_amount=parse_decimal(amount, AMOUNT_DECIMALS),
        quantity=parse_quantity(quantity),
        margin_percent=parse_decimal(margin, MARGIN_DECIMALS),
        tax_rate=TaxRate(tax_rate),
    )


def format_currency(value: int, symbol: str | None = None) -> str:
    """
    Ціле число у форматі es-ES: крапка як роздільник тисяч,
    групування тільки з п'яти цифр (1234 -> $1234, 12345 -> $12.345).
    """
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    digits = str(abs(int(value)))
    if len(digits) >= 5:
        digits = f"{int(digits):,}".replace(",", ".")
    sign = "-" if value < 0 else ""
    return f"{symbol}{sign}{digits}"


def build_response(result: CalculationResult, tax_rate: TaxRate) -> PricingResponse:
    fields = result.model_dump()
    return PricingResponse(
        **fields,
        tax_percent=tax_rate.percent,
        formatted=FormattedResult(**{k: format_currency(v) for k, v in fields.items()}),
    )
