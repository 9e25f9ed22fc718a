# households/signup_form.py

import itertools
import logging
import threading
from collections.abc import Mapping

from api.errors import NetworkError, SubmissionRejected
from households.models import (
    HEAD_FIELDS,
    MAX_MEMBERS,
    MEMBER_FIELDS,
    REQUIRED_HEAD_FIELDS,
    Household,
    Member,
    Person,
)
from households.service import HouseholdService
from i18n.translator import Translator

logger = logging.getLogger(__name__)

HEAD = "head"
GENERAL_ERROR = "general"

# Backend may report the composed date or any of its selects
DOB_ERROR_KEYS = ("dob", "dobMonth", "dobDay", "dobYear")

# Form states
EDITING = "editing"
SUBMITTING = "submitting"
SUBMITTED = "submitted"


class SignupForm:
    """
    In-progress household signup for one browser.

    editing -> submitting -> submitted
                          -> editing (with errors)

    `submitted` is terminal. To register another household, build a new
    SignupForm.
    """

    def __init__(self, service: HouseholdService, translator: Translator | None = None):
        self.service = service
        self.translator = translator or Translator()

        self.head = Person()
        self.members: list[Member] = []
        self.errors: dict[str, str] = {}
        self.state = EDITING
        self.acknowledgement = None

        self._member_ids = itertools.count(1)
        # Guards the editing -> submitting check-and-set across request threads
        self._submit_lock = threading.Lock()

    # -------------------------------------------------
    # Members
    # -------------------------------------------------

    @property
    def can_add_member(self) -> bool:
        return self.state == EDITING and len(self.members) < MAX_MEMBERS

    def add_member(self) -> Member | None:
        if not self.can_add_member:
            return None
        member = Member(id=next(self._member_ids))
        self.members.append(member)
        return member

    def remove_member(self, member_id: int) -> bool:
        if self.state != EDITING:
            return False
        for i, member in enumerate(self.members):
            if member.id == member_id:
                del self.members[i]
                return True
        return False

    def has_member(self, member_id: int) -> bool:
        return any(m.id == member_id for m in self.members)

    def get_member(self, member_id: int) -> Member:
        for member in self.members:
            if member.id == member_id:
                return member
        raise KeyError(f"No household member with id {member_id}")

    # -------------------------------------------------
    # Field edits
    # -------------------------------------------------

    def update_field(self, person_ref, field_name: str, value: str):
        """
        person_ref is HEAD or a member id. field_name is the wire name
        ("firstName", "dobYear", ...). No validation here.
        """
        if self.state != EDITING:
            logger.debug("Ignoring edit of %s.%s in state %s", person_ref, field_name, self.state)
            return

        if person_ref == HEAD:
            person, allowed = self.head, HEAD_FIELDS
        else:
            person, allowed = self.get_member(person_ref).person, MEMBER_FIELDS

        attr = allowed.get(field_name)
        if attr is None:
            raise ValueError(f"Unknown field {field_name!r} for {person_ref}")

        setattr(person, attr, "" if value is None else str(value))

    def apply(self, form_data: Mapping):
        """
        Bind a posted HTML form: `head-<field>` and `member-<id>-<field>`.
        Other names (action buttons, lang, ...) are not ours and are skipped,
        as are members removed since the page was rendered.
        """
        for name, value in form_data.items():
            ref, field_name = parse_field_name(name)
            if ref is None:
                continue
            if ref != HEAD and not self.has_member(ref):
                continue
            allowed = HEAD_FIELDS if ref == HEAD else MEMBER_FIELDS
            if field_name not in allowed:
                continue
            self.update_field(ref, field_name, value)

    # -------------------------------------------------
    # Submit
    # -------------------------------------------------

    def validate(self) -> dict[str, str]:
        head = self.head.normalized()
        required = self.translator.t("misc.fieldrequired")
        return {
            name: required
            for name in REQUIRED_HEAD_FIELDS
            if not getattr(head, HEAD_FIELDS[name])
        }

    def build_household(self) -> Household:
        members = [m.person.normalized() for m in self.members]
        return Household(
            head=self.head.normalized(),
            members=[p for p in members if p.has_name()],
        )

    def submit(self) -> bool:
        with self._submit_lock:
            if self.state != EDITING:
                logger.warning("Ignoring signup submit while %s", self.state)
                return False
            self.state = SUBMITTING

        self.errors = {}
        try:
            local_errors = self.validate()
            if local_errors:
                self.errors = local_errors
                self.state = EDITING
                return False

            household = self.build_household()
            self.acknowledgement = self.service.submit(household)
        except SubmissionRejected as e:
            self.errors = e.errors or {GENERAL_ERROR: self.translator.t("misc.error")}
            self.state = EDITING
            return False
        except NetworkError as e:
            logger.error("Error submitting household: %s", e)
            self.errors = {GENERAL_ERROR: self.translator.t("misc.error")}
            self.state = EDITING
            return False
        except Exception:
            logger.exception("Unexpected error submitting household")
            self.errors = {GENERAL_ERROR: self.translator.t("misc.error")}
            self.state = EDITING
            return False

        self.state = SUBMITTED
        return True

    # -------------------------------------------------
    # View helpers
    # -------------------------------------------------

    @property
    def submitted(self) -> bool:
        return self.state == SUBMITTED

    def error_for(self, field_name: str) -> str | None:
        return self.errors.get(field_name)

    def dob_error(self) -> str | None:
        for name in DOB_ERROR_KEYS:
            if name in self.errors:
                return self.errors[name]
        return None

    def form_errors(self) -> list[str]:
        """
        Errors with no input of their own on the page, shown once by the
        submit button.
        """
        return [msg for key, msg in self.errors.items() if key not in HEAD_FIELDS and key not in DOB_ERROR_KEYS]


def field_input_name(person_ref, field_name: str) -> str:
    if person_ref == HEAD:
        return f"{HEAD}-{field_name}"
    return f"member-{person_ref}-{field_name}"


def parse_field_name(name: str):
    """
    "head-firstName"     -> ("head", "firstName")
    "member-3-firstName" -> (3, "firstName")
    anything else        -> (None, None)
    """
    parts = name.split("-")
    if len(parts) == 2 and parts[0] == HEAD:
        return HEAD, parts[1]
    if len(parts) == 3 and parts[0] == "member" and parts[1].isdigit():
        return int(parts[1]), parts[2]
    return None, None
