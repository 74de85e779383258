"""Quote request validation."""

import datetime as dt

from stayquote.models import BookingRequest, CheckPricingRequest, ErrorCode, QuoteError
from stayquote.utils.dates import parse_iso_date


def validate_request(
    request: CheckPricingRequest,
    today: dt.date | None = None,
) -> BookingRequest:
    """Validate a raw quote request.

    Checks run in order: required fields, date parsing, past check-in,
    date ordering, guest count.

    Args:
        request: Raw request fields
        today: Reference date for the past check-in rule. Defaults to today.

    Returns:
        Validated BookingRequest

    Raises:
        QuoteError: MISSING_PARAMETER, PAST_CHECK_IN, INVALID_DATE_RANGE
            or INVALID_GUEST_COUNT
        ValueError: If a date is not valid ISO-8601
    """
    missing = [
        name
        for name in ("property_id", "check_in", "check_out", "guests")
        if not getattr(request, name)
    ]
    if missing:
        raise QuoteError(
            ErrorCode.MISSING_PARAMETER,
            details={"missing": missing},
        )

    check_in = parse_iso_date(request.check_in)  # type: ignore[arg-type]
    check_out = parse_iso_date(request.check_out)  # type: ignore[arg-type]

    if check_in < (today or dt.date.today()):
        raise QuoteError(
            ErrorCode.PAST_CHECK_IN,
            details={"check_in": check_in.isoformat()},
        )

    if check_in >= check_out:
        raise QuoteError(
            ErrorCode.INVALID_DATE_RANGE,
            details={"check_in": check_in.isoformat(), "check_out": check_out.isoformat()},
        )

    if request.guests < 1:  # type: ignore[operator]
        raise QuoteError(
            ErrorCode.INVALID_GUEST_COUNT,
            details={"guests": request.guests},
        )

    return BookingRequest(
        property_id=request.property_id,
        check_in=check_in,
        check_out=check_out,
        guests=request.guests,
    )
