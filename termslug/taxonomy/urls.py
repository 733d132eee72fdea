# taxonomy/urls.py
from django.urls import path

from taxonomy.views import SlugApplyView, SlugPreviewView, TaxonomyListView, TermListView

urlpatterns = [
    path("taxonomies/", TaxonomyListView.as_view(), name="taxonomy-list"),
    path("terms/", TermListView.as_view(), name="term-list"),
    path("slugs/preview/", SlugPreviewView.as_view(), name="slugs-preview"),
    path("slugs/apply/", SlugApplyView.as_view(), name="slugs-apply"),
]
