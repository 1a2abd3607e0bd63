"""Contact form: one JSON POST per submit, result kept for the page to show."""
import json
import logging
from enum import Enum
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

FIELDS = ('name', 'email', 'message')
CONTACT_PATH = "/api/contact"
SUCCESS_MESSAGE = "Thanks! Your message has been sent."
ERROR_MESSAGE = "Something went wrong. Please try again later."


class SubmissionResult(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class ContactError(Exception):
    """The backend answered with a non-2xx status."""


def empty_fields() -> Dict[str, str]:
    return {f: "" for f in FIELDS}


class ContactFormController:
    def __init__(self, backend_url: str = "", session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.backend_url = (backend_url or "").rstrip('/')
        self._session = session or requests.Session()
        self._timeout = timeout
        self.fields = empty_fields()
        self.result = SubmissionResult.IDLE
        self.submitting = False
        self.error = ""

    @property
    def url(self) -> str:
        return f"{self.backend_url}{CONTACT_PATH}"

    @property
    def sent(self) -> bool:
        return self.result is SubmissionResult.SUCCESS

    @property
    def message(self) -> str:
        if self.result is SubmissionResult.SUCCESS:
            return SUCCESS_MESSAGE
        return self.error

    @staticmethod
    def missing_fields(fields: Dict[str, str]) -> List[str]:
        return [f for f in FIELDS if not fields.get(f)]

    def submit(self, fields: Dict[str, str]) -> SubmissionResult:
        missing = self.missing_fields(fields)
        if missing:
            raise ValueError(f"Missing contact fields: {', '.join(missing)}")

        payload = {f: fields[f] for f in FIELDS}
        self.fields = dict(payload)
        self.result = SubmissionResult.PENDING
        self.submitting = True
        self.error = ""
        try:
            resp = self._session.post(
                self.url,
                data=json.dumps(payload),
                headers={'Content-Type': 'application/json'},
                timeout=self._timeout,
            )
            if not 200 <= resp.status_code < 300:
                raise ContactError(f"HTTP {resp.status_code} from {self.url}")
            self.result = SubmissionResult.SUCCESS
            self.fields = empty_fields()
            logger.info("Contact message from %s delivered", payload['email'])
        except (requests.RequestException, ContactError) as e:
            self.result = SubmissionResult.ERROR
            self.error = ERROR_MESSAGE
            logger.warning("Contact submission failed: %s", e)
        finally:
            self.submitting = False
        return self.result
