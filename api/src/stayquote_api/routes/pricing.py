"""Pricing endpoint for stay availability and price quotes.

POST /check-pricing answers whether a stay is bookable and, if so, its
price breakdown. Negative answers (unavailable dates, minimum stay) are
200 responses with available=false; only invalid input or missing data
produce error statuses.

Amounts are integers in the minor unit of the property's currency.
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from stayquote.models import CheckPricingRequest, QuoteOutcome
from stayquote.services.quote import QuoteService
from stayquote_api.dependencies import get_quote_service

router = APIRouter(tags=["pricing"])


@router.post(
    "/check-pricing",
    summary="Check availability and price for a stay",
    description="""
Check whether a property can be booked for a stay and quote its price.

Returns exactly one of:
- `available: false, reason: "unavailable_dates"` with the blocked nights
- `available: false, reason: "minimum_stay"` with the required nights
- `available: true` with the price breakdown and nightly rates

**Notes:**
- Dates are ISO-8601 (YYYY-MM-DD); checkOut is exclusive
- The longest minimum stay of any night in the range applies
- `meta.source` names the availability subsystem that answered
""",
    response_description="Availability outcome with pricing when bookable",
    response_model=QuoteOutcome,
    responses={
        200: {
            "description": "Quote computed",
            "content": {
                "application/json": {
                    "examples": {
                        "priced": {
                            "summary": "Bookable stay",
                            "value": {
                                "available": True,
                                "pricing": {
                                    "accommodationTotal": 24000,
                                    "cleaningFee": 2000,
                                    "discountPercentage": 0,
                                    "discountAmount": 0,
                                    "subtotal": 24000,
                                    "total": 26000,
                                    "numberOfNights": 2,
                                    "averageNightlyRate": 12000,
                                    "dailyRates": {
                                        "2026-11-02": 12000,
                                        "2026-11-03": 12000,
                                    },
                                    "currency": "EUR",
                                },
                                "meta": {"source": "availability_table"},
                            },
                        },
                        "minimum_stay": {
                            "summary": "Stay too short",
                            "value": {
                                "available": False,
                                "reason": "minimum_stay",
                                "minimumStay": 3,
                                "requiredNights": 3,
                                "meta": {"source": "availability_table"},
                            },
                        },
                        "unavailable_dates": {
                            "summary": "Nights already taken",
                            "value": {
                                "available": False,
                                "reason": "unavailable_dates",
                                "unavailableDates": ["2026-11-03"],
                                "meta": {"source": "availability_table"},
                            },
                        },
                    }
                }
            },
        },
        400: {"description": "Missing parameters, past check-in or invalid date range"},
        404: {"description": "Property or price data not found"},
        500: {"description": "Unexpected failure while checking pricing"},
    },
)
async def check_pricing(
    body: CheckPricingRequest,
    service: QuoteService = Depends(get_quote_service),
) -> QuoteOutcome:
    """Quote a stay.

    The quote pipeline blocks on DynamoDB, so it runs in the threadpool.
    """
    return await run_in_threadpool(service.check_pricing, body)
