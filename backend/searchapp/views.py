import logging

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from aiapp.intent import resolve_intent
from analyticsapp.utils import log_lead
from business.serializers import CompanyPublicSerializer, RatingSummarySerializer
from .aggregation import aggregate_reviews
from .filters import apply_filters
from .geo import distance_km
from .selectors import review_ratings, verified_companies
from .serializers import ChatQuerySerializer, FilterStateSerializer, OriginSerializer, filter_data_from_query
from .sorting import sort_companies

logger = logging.getLogger(__name__)


def _available(companies):
    services, regions, methods = set(), set(), set()
    for c in companies:
        services.update(c.services or [])
        if c.region:
            regions.add(c.region)
        methods.update(c.payment_methods or [])
    return {"services": sorted(services), "regions": sorted(regions), "payment_methods": sorted(methods)}


class DirectoryView(APIView):
    """
    GET /api/v1/search/directory/?service=&region=&sort=&min_rating=&...&lat=&lng=

    Loads every verified company and every rating once, then filters and
    sorts in memory. Unknown sort modes and malformed numbers are 400s.
    A lead is logged only when the request carries track=1.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        params = request.query_params
        fser = FilterStateSerializer(data=filter_data_from_query(params))
        fser.is_valid(raise_exception=True)
        state = fser.to_state()
        oser = OriginSerializer(data={k: params[k] for k in ("lat", "lng") if params.get(k)})
        oser.is_valid(raise_exception=True)
        origin = oser.to_origin()

        companies = verified_companies()
        ratings = aggregate_reviews(review_ratings())
        results = sort_companies(apply_filters(companies, state, ratings, origin), state.sort_by, ratings, origin)

        # only the initial page load sends track=1
        if params.get("track") == "1" and (state.service or state.region):
            log_lead(f"{state.service or 'Any'} in {state.region or 'Any'}", origin=origin)

        rows = []
        for company in results:
            row = CompanyPublicSerializer(company).data
            summary = ratings.get(company.id)
            row["rating"] = RatingSummarySerializer(summary).data if summary else None
            row["distance_km"] = distance_km(origin, company.location)
            rows.append(row)
        return Response({
            "count": len(rows),
            "filters": fser.data,
            "available": _available(companies),
            "results": rows,
        })


class ChatSearchView(APIView):
    """
    POST /api/v1/search/chat/ {"query": "..."}
    Resolves free text to directory params and logs the query as a lead.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        ser = ChatQuerySerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        query = ser.validated_data["query"]
        intent = resolve_intent(query)
        log_lead(query)
        logger.info("chat search resolved via %s: %s", intent.source, intent.as_params())
        return Response({**intent.as_params(), "redirect": intent.redirect, "source": intent.source})
