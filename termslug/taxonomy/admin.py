from django.contrib import admin, messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect
from django.template.response import TemplateResponse
from django.urls import path
from mptt.admin import DraggableMPTTAdmin

from .errors import NoTaxonomiesFound
from .models import Taxonomy, Term
from .services import DjangoTermStore, Mode, reconcile


@admin.register(Taxonomy)
class TaxonomyAdmin(admin.ModelAdmin):
    list_display = ("name", "label", "hierarchical")
    search_fields = ("name", "label")
    list_filter = ("hierarchical",)


@admin.register(Term)
class TermAdmin(DraggableMPTTAdmin):
    list_display = ("tree_actions", "indented_title", "taxonomy", "slug", "count")
    list_display_links = ("indented_title",)
    list_filter = ("taxonomy",)
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    change_list_template = "admin/taxonomy/term/change_list.html"

    def get_urls(self):
        urls = super().get_urls()
        custom = [
            path(
                "sanitize-slugs/",
                self.admin_site.admin_view(self.sanitize_slugs_view),
                name="taxonomy_term_sanitize_slugs",
            ),
        ]
        return custom + urls

    def sanitize_slugs_view(self, request):
        """
        Страница «Sanitize slugs»: две формы - применить и предпросмотр.
        CSRF проверяет admin_view, права - change_term.
        """
        if not self.has_change_permission(request):
            raise PermissionDenied

        preview = None
        if request.method == "POST":
            if "run_slug_sanitization" in request.POST:
                try:
                    result = reconcile(DjangoTermStore(), mode=Mode.APPLY)
                except NoTaxonomiesFound:
                    messages.error(request, "An error occurred during slug sanitization. Check your error logs.")
                else:
                    messages.success(request, f"{result.updated} taxonomy terms have been sanitized and updated.")
                    if result.failures:
                        messages.warning(request, f"{len(result.failures)} failures, see error logs.")
                return redirect(request.path)

            if "preview_slug_sanitization" in request.POST:
                try:
                    preview = reconcile(DjangoTermStore(), mode=Mode.PREVIEW)
                except NoTaxonomiesFound:
                    messages.error(request, "No taxonomies found to preview.")

        context = {
            **self.admin_site.each_context(request),
            "title": "Sanitize Taxonomy Slugs",
            "opts": self.model._meta,
            "preview": preview,
        }
        return TemplateResponse(request, "admin/taxonomy/sanitize_slugs.html", context)
