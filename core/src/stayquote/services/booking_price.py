"""Booking total aggregation.

Turns a per-night price map into the totals of a booking:
- Accommodation total: sum of nightly prices
- Length-of-stay discount: best tier whose min_nights the stay reaches,
  applied to the accommodation total
- Subtotal: accommodation total minus discount
- Total: subtotal plus the one-off cleaning fee

All amounts are integers in the property's minor currency unit.
"""

from collections.abc import Mapping, Sequence

from stayquote.models import BookingPriceBreakdown, LengthOfStayDiscount


def select_length_of_stay_discount(
    nights: int,
    discounts: Sequence[LengthOfStayDiscount] | None,
) -> LengthOfStayDiscount | None:
    """Pick the discount tier with the highest min_nights reached by the stay.

    Args:
        nights: Number of nights in the stay
        discounts: Discount schedule in any order

    Returns:
        The applicable tier, or None if the stay is too short for all of them
    """
    applicable = [d for d in discounts or [] if d.min_nights <= nights]
    if not applicable:
        return None
    return max(applicable, key=lambda d: d.min_nights)


def calculate_booking_price(
    nightly_prices: Mapping[str, int],
    cleaning_fee: int = 0,
    discounts: Sequence[LengthOfStayDiscount] | None = None,
) -> BookingPriceBreakdown:
    """Aggregate nightly prices into booking totals.

    Args:
        nightly_prices: Price per night keyed by ISO date
        cleaning_fee: One-off cleaning fee
        discounts: Length-of-stay discount schedule

    Returns:
        BookingPriceBreakdown with subtotal, discount and total

    Raises:
        ValueError: If there are no nights to price
    """
    number_of_nights = len(nightly_prices)
    if number_of_nights == 0:
        raise ValueError("Cannot price a booking with no nights")

    accommodation_total = sum(nightly_prices.values())

    discount = select_length_of_stay_discount(number_of_nights, discounts)
    percentage = discount.discount_percentage if discount else 0
    # Integer division keeps amounts in whole minor units
    discount_amount = (accommodation_total * percentage) // 100

    subtotal = accommodation_total - discount_amount

    return BookingPriceBreakdown(
        accommodation_total=accommodation_total,
        cleaning_fee=cleaning_fee,
        discount_percentage=percentage,
        discount_amount=discount_amount,
        subtotal=subtotal,
        total=subtotal + cleaning_fee,
        number_of_nights=number_of_nights,
        average_nightly_rate=accommodation_total // number_of_nights,
    )
