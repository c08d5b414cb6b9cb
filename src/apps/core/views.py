"""Core app views."""

import json
import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from apps.contact.services import ContactSubmitter
from apps.contact.state import ContactForm, SubmissionState, begin_submit
from apps.showcase.fallback import DEFAULT_PROJECT_IMAGE
from apps.showcase.services import ShowcaseLoader
from apps.showcase.types import Showcase

from .backend import BackendClient
from .content import ABOUT_HIGHLIGHTS, CONTACT_LINKS, NAV_ITEMS, SKILLS

logger = logging.getLogger(__name__)


def _page_context(showcase: Showcase, contact: SubmissionState) -> dict:
    return {
        "nav_items": NAV_ITEMS,
        "skills": SKILLS,
        "about_highlights": ABOUT_HIGHLIGHTS,
        "contact_links": CONTACT_LINKS,
        "showcase": showcase,
        "default_project_image": DEFAULT_PROJECT_IMAGE,
        "contact": contact,
    }


class RobotsTxtView(View):
    """Serve robots.txt."""

    ROBOTS_TXT = (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        "Disallow: /api/\n"
    )

    def get(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse(self.ROBOTS_TXT, content_type="text/plain")


class IndexView(View):
    """Public homepage with the showcase overlaid from the backend."""

    template_name = "index.html"

    async def get(self, request: HttpRequest) -> HttpResponse:
        showcase = await ShowcaseLoader(BackendClient.from_settings()).load()
        return render(request, self.template_name, _page_context(showcase, SubmissionState.initial()))


class ContactSubmitView(View):
    """Handle contact form submissions from the homepage."""

    template_name = "index.html"

    async def post(self, request: HttpRequest) -> HttpResponse:
        """Submit the form and re-render the page with the resulting state."""
        client = BackendClient.from_settings()
        state = SubmissionState(form=ContactForm.from_data(request.POST))
        result = await ContactSubmitter(client).submit(state)
        showcase = await ShowcaseLoader(client).load()

        context = _page_context(showcase, result)
        context["scroll_to"] = "contact"
        status = 200 if not result.error else 400
        return render(request, self.template_name, context, status=status)


class ShowcaseApiView(View):
    """API: the showcase as currently displayed, fallback included."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        showcase = await ShowcaseLoader(BackendClient.from_settings()).load()
        return JsonResponse(showcase.as_dict())


@method_decorator(csrf_exempt, name="dispatch")
class ContactApiView(View):
    """API: submit the contact form as JSON and get the resulting state back."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = json.loads(request.body)
        except ValueError:
            logger.info("Rejected contact API request with a malformed body")
            return JsonResponse({"error": "Invalid JSON body"}, status=400)
        if not isinstance(data, dict):
            return JsonResponse({"error": "Expected a JSON object"}, status=400)

        state = SubmissionState(form=ContactForm.from_data(data))
        pending = begin_submit(state)
        if not pending.is_submitting:
            return JsonResponse(pending.as_dict(), status=400)

        result = await ContactSubmitter(BackendClient.from_settings()).send(pending)
        status = 200 if result.show_success else 502
        return JsonResponse(result.as_dict(), status=status)
