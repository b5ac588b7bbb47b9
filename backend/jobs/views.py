from django.conf import settings
from rest_framework import generics
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from billing.permissions import require_feature
from common.mixins import LoggedActionsMixin, OwnerScopedModelViewSet
from common.permissions import IsBusinessUser
from .models import JOB_TYPES, Job
from .serializers import JobSerializer


class JobViewSet(LoggedActionsMixin, OwnerScopedModelViewSet):
    """Owner CRUD over job postings; posting is a Pro feature."""
    queryset = Job.objects.select_related("company")
    serializer_class = JobSerializer
    permission_classes = [IsBusinessUser, require_feature("post_jobs")]
    search_fields = ("title", "description", "region")
    ordering_fields = ("posted_at", "title", "application_deadline")
    default_ordering = ("-posted_at",)

    def perform_create(self, serializer):
        company = getattr(self.request.user, "company", None)
        obj = serializer.save(user=self.get_owner(), company=company)
        self._log_action("create", obj)
        return obj


class NoticeboardView(generics.GenericAPIView):
    """
    GET /api/v1/jobs/noticeboard/?job_type=Casual
    Latest postings, newest first, plus the job types present among them.
    """
    serializer_class = JobSerializer
    permission_classes = [AllowAny]

    def get(self, request):
        limit = settings.DIRECTORY["NOTICEBOARD_LIMIT"]
        latest = list(Job.objects.select_related("company").order_by("-posted_at")[:limit])
        present = sorted({j.job_type for j in latest}, key=_job_type_order)
        job_type = request.query_params.get("job_type")
        if job_type and job_type != "All":
            latest = [j for j in latest if j.job_type == job_type]
        return Response({
            "job_types": present,
            "results": self.get_serializer(latest, many=True).data,
        })


def _job_type_order(value):
    # fixed categories first in their usual order, custom ones alphabetically after
    return (JOB_TYPES.index(value), "") if value in JOB_TYPES else (len(JOB_TYPES), value.lower())
