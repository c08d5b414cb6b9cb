"""
Contact form state and its transitions.

Every transition is a plain function that takes a ``SubmissionState`` and
returns a new one, so the whole flow can be exercised without rendering
anything:

    EDITING --submit, invalid--> EDITING (error set, form kept)
    EDITING --submit, valid----> SUBMITTING (error cleared)
    SUBMITTING --2xx-----------> EDITING (submitted, form cleared)
    SUBMITTING --failure-------> EDITING (error set, form kept)
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, replace
from enum import Enum

FIELDS = ("name", "phone", "email", "remarks")


class Status(Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class ContactForm:
    """The four contact fields. Only ``phone`` is optional."""

    name: str = ""
    phone: str = ""
    email: str = ""
    remarks: str = ""

    @classmethod
    def empty(cls) -> "ContactForm":
        return cls()

    @classmethod
    def from_data(cls, data: Mapping) -> "ContactForm":
        """Build a form from request data, keeping values exactly as entered."""
        values = {}
        for name in FIELDS:
            value = data.get(name)
            values[name] = "" if value is None else str(value)
        return cls(**values)

    def with_field(self, name: str, value: str) -> "ContactForm":
        if name not in FIELDS:
            raise ValueError(f"Unknown contact field: {name}")
        return replace(self, **{name: value})

    def as_payload(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SubmissionState:
    status: Status = Status.EDITING
    form: ContactForm = field(default_factory=ContactForm)
    submitted: bool = False
    error: str = ""

    @classmethod
    def initial(cls) -> "SubmissionState":
        return cls()

    @property
    def is_submitting(self) -> bool:
        return self.status is Status.SUBMITTING

    @property
    def show_success(self) -> bool:
        return self.submitted and not self.error

    def as_dict(self) -> dict:
        return {
            "status": self.status.value,
            "form": self.form.as_payload(),
            "submitted": self.submitted,
            "error": self.error,
        }


def edit(state: SubmissionState, name: str, value: str) -> SubmissionState:
    """Apply a single field change from user input."""
    return replace(state, form=state.form.with_field(name, value))


def begin_submit(state: SubmissionState) -> SubmissionState:
    """Validate and move to SUBMITTING, or stay EDITING with an error."""
    from .validation import validate_contact

    if state.is_submitting:
        return state
    error = validate_contact(state.form)
    if error:
        return replace(state, status=Status.EDITING, error=error)
    return replace(state, status=Status.SUBMITTING, error="")


def submit_succeeded(state: SubmissionState) -> SubmissionState:
    return replace(
        state,
        status=Status.EDITING,
        form=ContactForm.empty(),
        submitted=True,
        error="",
    )


def submit_failed(state: SubmissionState, message: str) -> SubmissionState:
    return replace(state, status=Status.EDITING, error=message)
