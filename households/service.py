# households/service.py

import logging

from api.client import BackendClient
from api.errors import SubmissionRejected
from households.models import Household

logger = logging.getLogger(__name__)

HOUSEHOLD_ENDPOINT = "/household"


class HouseholdService:
    def __init__(self, backend: BackendClient):
        self.backend = backend

    def submit(self, household: Household) -> dict:
        """
        One attempt, no retry.

        Returns the backend acknowledgement. Raises SubmissionRejected on a
        non-2xx answer (with the backend's field errors when present) and
        lets NetworkError through.
        """
        resp = self.backend.post_json(HOUSEHOLD_ENDPOINT, household.to_dict())

        if resp.ok:
            logger.info("Household saved (members=%d)", len(household.members))
            return resp.data

        errors = resp.data.get("errors")
        if not isinstance(errors, dict) or not errors:
            errors = None
        else:
            errors = {str(k): str(v) for k, v in errors.items()}

        logger.warning(
            "Household rejected (status=%s, fields=%s)",
            resp.status_code,
            sorted(errors) if errors else None,
        )
        raise SubmissionRejected(errors=errors, status_code=resp.status_code)
