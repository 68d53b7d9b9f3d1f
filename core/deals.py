# =============================================================================
# core/deals.py  —  Deal Analysis Calculators
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   The arithmetic behind the deal-analysis tools:
#     - analyze_seller_finance()  owner-carried note: payment, cash flow, balloon
#     - calculate_max_offer()     wholesale MAO using the "70% rule"
#     - analyze_rental()          NOI, cap rate, GRM, 1% rule
#
#   LLMs are unreliable at amortization math, so the agent never does it
#   itself.  It calls a tool, gets exact numbers plus a one-paragraph summary,
#   and narrates from there.
#
# CONVENTIONS:
#   - Money is rounded to cents, percentages to two decimals.
#   - Bad inputs raise ValidationError; nothing is silently clamped.
# =============================================================================

from typing import Optional

from core.errors import ValidationError
from core.models import MaxOfferAnalysis, RentalAnalysis, SellerFinanceAnalysis


def _money(value: float) -> float:
    return round(value, 2)


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Standard fully-amortizing monthly payment (unrounded)."""
    months = term_years * 12
    if principal <= 0:
        return 0.0
    rate = annual_rate_pct / 100 / 12
    if rate == 0:
        return principal / months
    return principal * rate / (1 - (1 + rate) ** -months)


def remaining_balance(
    principal: float, annual_rate_pct: float, payment: float, months_paid: int
) -> float:
    """Loan balance left after `months_paid` payments."""
    rate = annual_rate_pct / 100 / 12
    if rate == 0:
        return max(principal - payment * months_paid, 0.0)
    growth = (1 + rate) ** months_paid
    return max(principal * growth - payment * (growth - 1) / rate, 0.0)


def analyze_seller_finance(
    purchase_price: float,
    down_payment: float,
    interest_rate_pct: float,
    term_years: int,
    monthly_rent: float = 0,
    monthly_expenses: float = 0,
    balloon_years: Optional[int] = None,
) -> SellerFinanceAnalysis:
    """Break a seller-financed purchase down into monthly numbers.

    Args:
        purchase_price: Agreed price.
        down_payment: Cash to the seller at closing.
        interest_rate_pct: Annual note rate, e.g. 5 for 5%.
        term_years: Amortization period.
        monthly_rent: Expected rent (0 if owner-occupied).
        monthly_expenses: Taxes, insurance, maintenance, management.
        balloon_years: Year the remaining balance comes due, if any.

    Raises:
        ValidationError: on non-positive price/term, a down payment outside
            [0, price], a negative rate, or a balloon outside the term.
    """
    if purchase_price <= 0:
        raise ValidationError("purchase_price must be greater than zero.")
    if down_payment < 0 or down_payment > purchase_price:
        raise ValidationError("down_payment must be between 0 and the purchase price.")
    if interest_rate_pct < 0:
        raise ValidationError("interest_rate_pct cannot be negative.")
    if term_years <= 0:
        raise ValidationError("term_years must be greater than zero.")
    if balloon_years is not None and not 0 < balloon_years <= term_years:
        raise ValidationError("balloon_years must fall within the loan term.")

    loan = purchase_price - down_payment
    payment = monthly_payment(loan, interest_rate_pct, term_years)
    cash_flow = monthly_rent - monthly_expenses - payment
    annual = cash_flow * 12
    coc = _money(annual / down_payment * 100) if down_payment > 0 else None

    balloon_balance = None
    if balloon_years is not None:
        balloon_balance = _money(
            remaining_balance(loan, interest_rate_pct, payment, balloon_years * 12)
        )

    parts = [
        f"${loan:,.0f} carried at {interest_rate_pct:g}% over {term_years} years "
        f"is ${payment:,.2f}/month.",
    ]
    if monthly_rent:
        verdict = "positive" if cash_flow >= 0 else "NEGATIVE"
        parts.append(f"Cash flow is {verdict} at ${cash_flow:,.2f}/month.")
    if coc is not None and monthly_rent:
        parts.append(f"Cash-on-cash return: {coc:g}%.")
    if balloon_balance is not None:
        parts.append(
            f"⚠ Balloon of ${balloon_balance:,.2f} due after {balloon_years} years — "
            f"plan the refinance or sale."
        )

    return SellerFinanceAnalysis(
        purchase_price=_money(purchase_price),
        down_payment=_money(down_payment),
        loan_amount=_money(loan),
        interest_rate_pct=interest_rate_pct,
        term_years=term_years,
        monthly_payment=_money(payment),
        monthly_cash_flow=_money(cash_flow),
        annual_cash_flow=_money(annual),
        cash_on_cash_pct=coc,
        balloon_years=balloon_years,
        balloon_balance=balloon_balance,
        summary=" ".join(parts),
    )


def calculate_max_offer(
    arv: float,
    repair_costs: float,
    assignment_fee: float = 10_000,
    rule_pct: float = 70,
) -> MaxOfferAnalysis:
    """Maximum allowable offer: ARV x rule% - repairs - assignment fee."""
    if arv <= 0:
        raise ValidationError("arv must be greater than zero.")
    if repair_costs < 0:
        raise ValidationError("repair_costs cannot be negative.")
    if assignment_fee < 0:
        raise ValidationError("assignment_fee cannot be negative.")
    if not 0 < rule_pct <= 100:
        raise ValidationError("rule_pct must be between 0 and 100.")

    mao = arv * rule_pct / 100 - repair_costs - assignment_fee
    viable = mao > 0

    if viable:
        summary = (
            f"Offer no more than ${mao:,.0f} "
            f"({rule_pct:g}% of ${arv:,.0f} ARV, less ${repair_costs:,.0f} repairs "
            f"and a ${assignment_fee:,.0f} fee)."
        )
    else:
        summary = (
            f"⚠ Repairs and fee exceed {rule_pct:g}% of ARV — "
            f"this deal doesn't work as a wholesale."
        )

    return MaxOfferAnalysis(
        arv=_money(arv),
        repair_costs=_money(repair_costs),
        assignment_fee=_money(assignment_fee),
        rule_pct=rule_pct,
        max_allowable_offer=_money(mao),
        is_viable=viable,
        summary=summary,
    )


def analyze_rental(
    purchase_price: float,
    monthly_rent: float,
    monthly_expenses: float = 0,
    vacancy_rate_pct: float = 5,
) -> RentalAnalysis:
    """Buy-and-hold snapshot: NOI, cap rate, gross rent multiplier, 1% rule."""
    if purchase_price <= 0:
        raise ValidationError("purchase_price must be greater than zero.")
    if monthly_rent <= 0:
        raise ValidationError("monthly_rent must be greater than zero.")
    if monthly_expenses < 0:
        raise ValidationError("monthly_expenses cannot be negative.")
    if not 0 <= vacancy_rate_pct < 100:
        raise ValidationError("vacancy_rate_pct must be between 0 and 100.")

    gross = monthly_rent * 12
    effective = gross * (1 - vacancy_rate_pct / 100)
    expenses = monthly_expenses * 12
    noi = effective - expenses
    cap_rate = round(noi / purchase_price * 100, 2)
    grm = round(purchase_price / gross, 2)
    one_pct = monthly_rent >= purchase_price * 0.01

    summary = (
        f"NOI of ${noi:,.0f}/year on a ${purchase_price:,.0f} price is a "
        f"{cap_rate:g}% cap rate (GRM {grm:g}). "
        + ("Passes the 1% rule." if one_pct else "Falls short of the 1% rule.")
    )

    return RentalAnalysis(
        purchase_price=_money(purchase_price),
        monthly_rent=_money(monthly_rent),
        gross_annual_rent=_money(gross),
        effective_annual_rent=_money(effective),
        annual_expenses=_money(expenses),
        net_operating_income=_money(noi),
        cap_rate_pct=cap_rate,
        gross_rent_multiplier=grm,
        meets_one_percent_rule=one_pct,
        summary=summary,
    )
