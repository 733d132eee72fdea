import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from taxonomy.models import Term

pytestmark = pytest.mark.django_db

URL_NAME = "admin:taxonomy_term_sanitize_slugs"


@pytest.fixture
def terms(make_taxonomy, make_term):
    tax = make_taxonomy("category")
    make_term(tax, "Café Déjà-vu", "cafe-deja-vu-old")
    make_term(tax, "Noël", "noel")
    return tax


class TestSanitizeSlugsPage:
    def test_page_renders_both_forms(self, admin_client):
        response = admin_client.get(reverse(URL_NAME))

        assert response.status_code == 200
        content = response.content.decode()
        assert 'name="run_slug_sanitization"' in content
        assert 'name="preview_slug_sanitization"' in content
        assert "csrfmiddlewaretoken" in content

    def test_changelist_links_to_page(self, admin_client):
        response = admin_client.get(reverse("admin:taxonomy_term_changelist"))

        assert reverse(URL_NAME) in response.content.decode()

    def test_preview_renders_table_without_writing(self, admin_client, terms):
        response = admin_client.post(reverse(URL_NAME), {"preview_slug_sanitization": "1"})

        content = response.content.decode()
        assert response.status_code == 200
        assert "1 terms will be updated" in content
        assert "cafe-deja-vu-old" in content
        assert "<th>New Slug</th>" in content
        assert Term.objects.get(name="Café Déjà-vu").slug == "cafe-deja-vu-old"

    def test_preview_without_changes(self, admin_client, make_taxonomy, make_term):
        make_term(make_taxonomy("category"), "Noël", "noel")

        response = admin_client.post(reverse(URL_NAME), {"preview_slug_sanitization": "1"})

        assert "No changes needed!" in response.content.decode()

    def test_apply_updates_and_reports_count(self, admin_client, terms):
        response = admin_client.post(reverse(URL_NAME), {"run_slug_sanitization": "1"}, follow=True)

        assert Term.objects.get(name="Café Déjà-vu").slug == "cafe-deja-vu"
        messages = [str(m) for m in response.context["messages"]]
        assert "1 taxonomy terms have been sanitized and updated." in messages

    def test_apply_without_taxonomies_reports_error(self, admin_client, make_taxonomy):
        make_taxonomy("post-format-internal")

        response = admin_client.post(reverse(URL_NAME), {"run_slug_sanitization": "1"}, follow=True)

        messages = [str(m) for m in response.context["messages"]]
        assert any("error occurred" in m for m in messages)

    def test_staff_without_permission_is_denied(self, client, terms):
        user = get_user_model().objects.create_user("editor", password="pw", is_staff=True)
        client.force_login(user)

        response = client.post(reverse(URL_NAME), {"run_slug_sanitization": "1"})

        assert response.status_code == 403
        assert Term.objects.get(name="Café Déjà-vu").slug == "cafe-deja-vu-old"

    def test_anonymous_is_redirected_to_login(self, client, terms):
        response = client.get(reverse(URL_NAME))

        assert response.status_code == 302
        assert "/admin/login/" in response["Location"]

    def test_post_without_csrf_token_is_rejected(self, terms):
        from django.test import Client

        csrf_client = Client(enforce_csrf_checks=True)
        user = get_user_model().objects.create_superuser("root", "root@example.com", "pw")
        csrf_client.force_login(user)

        response = csrf_client.post(reverse(URL_NAME), {"run_slug_sanitization": "1"})

        assert response.status_code == 403
        assert Term.objects.get(name="Café Déjà-vu").slug == "cafe-deja-vu-old"
