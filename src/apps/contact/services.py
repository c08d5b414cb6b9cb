"""Contact submission service."""

import logging

from apps.core.backend import BackendClient, BackendError

from .state import SubmissionState, begin_submit, submit_failed, submit_succeeded

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send. Please try again later."


class ContactSubmitter:
    """Validate a contact form and POST it to the backend's /contact endpoint."""

    def __init__(self, client: BackendClient) -> None:
        self.client = client

    async def submit(self, state: SubmissionState) -> SubmissionState:
        """
        Run one submit attempt and return the resulting state.

        A state that is already SUBMITTING is returned untouched, so at most
        one POST is in flight per form. Validation failures never reach the
        network.
        """
        if state.is_submitting:
            return state

        pending = begin_submit(state)
        if not pending.is_submitting:
            return pending
        return await self.send(pending)

    async def send(self, pending: SubmissionState) -> SubmissionState:
        """POST an already validated SUBMITTING state and resolve it back to EDITING."""
        if not pending.is_submitting:
            raise ValueError("Only a SUBMITTING state can be sent")

        try:
            response = await self.client.post_json("/contact", pending.form.as_payload())
        except BackendError as exc:
            logger.warning("Contact submission failed: %s", exc)
            return submit_failed(pending, str(exc) or SEND_FAILED_MESSAGE)

        if not response.ok:
            logger.warning("Contact endpoint returned HTTP %s", response.status)
            return submit_failed(pending, SEND_FAILED_MESSAGE)

        logger.info("Contact message sent for %s", pending.form.email)
        return submit_succeeded(pending)
