# =============================================================================
# core/responses.py  —  Seller Message Templates
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fills in short, ready-to-send replies for the situations that come up
#   over and over when working motivated sellers.  The agent picks the
#   scenario; this module does the wording, so every message stays on-script.
# =============================================================================

from core.errors import ValidationError
from core.models import SellerMessage


_TEMPLATES: dict[str, str] = {
    "initial_contact": (
        "Hi {seller}, this is {agent}. I came across {property} and wanted to "
        "reach out directly. I buy houses in the area and can close on your "
        "timeline, as-is, with no commissions. Would you be open to a quick "
        "conversation about what you'd need to make a sale work?"
    ),
    "follow_up": (
        "Hi {seller}, {agent} again. Just following up on {property}. "
        "No pressure at all. If your plans have changed or you'd like a "
        "no-obligation offer, I'm happy to put one together this week."
    ),
    "price_too_high": (
        "Thanks for being upfront, {seller}. Based on the repairs {property} "
        "needs and recent sales nearby, I can't get to that number with cash. "
        "If the price matters most, I may be able to pay closer to it with "
        "terms, such as monthly payments to you over time. Want me to run "
        "those numbers?"
    ),
    "not_interested": (
        "Understood, {seller}, and thanks for letting me know. I'll take "
        "{property} off my list. If anything changes down the road, feel "
        "free to reach out. {agent}"
    ),
    "seller_finance_pitch": (
        "{seller}, here's an option that could get you a higher price for "
        "{property}: instead of one lump sum, I'd pay a down payment now and "
        "then monthly payments to you, secured by the property. You'd earn "
        "interest like a bank would and skip the capital-gains hit of a "
        "single-year sale. Happy to walk through the numbers. {agent}"
    ),
}


def list_scenarios() -> list[str]:
    return list(_TEMPLATES.keys())


def generate_seller_response(
    scenario: str,
    seller_name: str,
    property_address: str = "",
    agent_name: str = "",
) -> SellerMessage:
    """Render a reply to a seller.

    Args:
        scenario: One of list_scenarios().
        seller_name: The seller's first name, as you'd greet them.
        property_address: Optional; falls back to "your property".
        agent_name: Optional sign-off name; falls back to "your local buyer".

    Raises:
        ValidationError: unknown scenario or blank seller name.
    """
    key = (scenario or "").strip().lower()
    if key not in _TEMPLATES:
        raise ValidationError(
            f"Unknown scenario {scenario!r}; expected one of {', '.join(list_scenarios())}."
        )
    if not seller_name or not seller_name.strip():
        raise ValidationError("seller_name is required.")

    message = _TEMPLATES[key].format(
        seller=seller_name.strip(),
        property=property_address.strip() or "your property",
        agent=agent_name.strip() or "your local buyer",
    )
    return SellerMessage(scenario=key, seller_name=seller_name.strip(), message=message)
