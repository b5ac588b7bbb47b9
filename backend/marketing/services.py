from __future__ import annotations

import logging
from typing import Dict

from django.db import transaction
from rest_framework.exceptions import ValidationError

from .models import AD_SPOTS, Ad, AdBooking

logger = logging.getLogger(__name__)

LIVE_BOOKING = (AdBooking.Status.PENDING, AdBooking.Status.APPROVED)


def spot_status(company) -> Dict[int, str]:
    """available | taken | yours, per home page spot."""
    taken = set(Ad.objects.filter(active=True).values_list("spot", flat=True))
    mine = set(
        AdBooking.objects.filter(company=company, status__in=LIVE_BOOKING).values_list("spot", flat=True)
    )
    out = {}
    for spot in AD_SPOTS:
        if spot in mine:
            out[spot] = "yours"
        elif spot in taken:
            out[spot] = "taken"
        else:
            out[spot] = "available"
    return out


@transaction.atomic
def approve_booking(booking: AdBooking) -> Ad:
    if booking.status != AdBooking.Status.PENDING:
        raise ValidationError({"status": f"Booking is already {booking.status}."})
    Ad.objects.filter(spot=booking.spot, active=True).update(active=False)
    ad = Ad.objects.create(
        company=booking.company,
        spot=booking.spot,
        image_url=booking.image_url,
        link_url=booking.link_url,
        active=True,
        booking=booking,
    )
    booking.status = AdBooking.Status.APPROVED
    booking.save(update_fields=["status", "updated_at"])
    logger.info("ad booking %s approved; spot %s now live", booking.id, booking.spot)
    return ad


def reject_booking(booking: AdBooking) -> AdBooking:
    if booking.status != AdBooking.Status.PENDING:
        raise ValidationError({"status": f"Booking is already {booking.status}."})
    booking.status = AdBooking.Status.REJECTED
    booking.save(update_fields=["status", "updated_at"])
    logger.info("ad booking %s rejected", booking.id)
    return booking
