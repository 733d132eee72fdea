# taxonomy/views.py
from django.db.models import Count
from django_filters import rest_framework as dj_filters
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiTypes
from rest_framework import filters, permissions
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.generics import ListAPIView
from rest_framework.response import Response
from rest_framework.views import APIView

from taxonomy.errors import NoTaxonomiesFound
from taxonomy.models import Taxonomy, Term
from taxonomy.pagination import LimitPageNumberPagination
from taxonomy.serializers import ReconcileResultSerializer, TaxonomySerializer, TermSerializer
from taxonomy.services import DjangoTermStore, Mode, reconcile


class TaxonomyListView(ListAPIView):
    """GET /api/taxonomies/ - все таксономии с количеством терминов."""
    serializer_class = TaxonomySerializer
    permission_classes = [permissions.IsAdminUser]
    pagination_class = None

    def get_queryset(self):
        return Taxonomy.objects.annotate(terms_count=Count("terms")).order_by("id")


class TermListView(ListAPIView):
    """
    GET /api/terms/
      ?taxonomy=<name>    - только термины таксономии
      ?parent=root|<id>   - корневые или дети конкретного термина
      ?search=<text>      - по имени/слагу
    """
    serializer_class = TermSerializer
    permission_classes = [permissions.IsAdminUser]
    pagination_class = LimitPageNumberPagination
    filter_backends = [dj_filters.DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ["count"]  # taxonomy и parent - руками, см. get_queryset
    search_fields = ["name", "slug"]
    ordering_fields = ["name", "slug", "id"]
    ordering = ["taxonomy_id", "tree_id", "lft"]

    @extend_schema(
        parameters=[
            OpenApiParameter("taxonomy", OpenApiTypes.STR, OpenApiParameter.QUERY, description="Идентификатор таксономии"),
            OpenApiParameter("parent", OpenApiTypes.STR, OpenApiParameter.QUERY, description="root или id родителя"),
        ],
        summary="Список терминов",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        ser = self.get_serializer(page, many=True)
        return self.paginator.get_paginated_response(
            ser.data, extra={"taxonomy": request.query_params.get("taxonomy")}
        )

    def get_queryset(self):
        qs = Term.objects.all().select_related("taxonomy", "parent")
        taxonomy = self.request.query_params.get("taxonomy")
        if taxonomy:
            if not Taxonomy.objects.filter(name=taxonomy).exists():
                raise NotFound("Таксономия не найдена")
            qs = qs.filter(taxonomy__name=taxonomy)
        parent = self.request.query_params.get("parent")
        if parent:
            if parent == "root":
                qs = qs.filter(parent__isnull=True)
            else:
                try:
                    parent_id = int(parent)
                except ValueError:
                    raise ValidationError({"parent": "Ожидается root или числовой id термина"})
                qs = qs.filter(parent_id=parent_id)
        return qs


class _ReconcileView(APIView):
    permission_classes = [permissions.IsAdminUser]
    mode = Mode.PREVIEW

    def post(self, request):
        try:
            result = reconcile(DjangoTermStore(), mode=self.mode)
        except NoTaxonomiesFound:
            raise NotFound("Не найдено ни одной таксономии для обработки")
        return Response(ReconcileResultSerializer(result).data)


class SlugPreviewView(_ReconcileView):
    """POST /api/slugs/preview/ - что поменяется, без записи в БД."""
    mode = Mode.PREVIEW

    @extend_schema(request=None, responses=ReconcileResultSerializer, summary="Предпросмотр пересчёта слагов")
    def post(self, request):
        return super().post(request)


class SlugApplyView(_ReconcileView):
    """POST /api/slugs/apply/ - пересчитать и сохранить слаги."""
    mode = Mode.APPLY

    @extend_schema(request=None, responses=ReconcileResultSerializer, summary="Пересчитать слаги терминов")
    def post(self, request):
        return super().post(request)
