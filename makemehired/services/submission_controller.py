"""Submission state machine: normalize, send, await, then display success or failure."""

import binascii
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, List, Optional

import httpx

from makemehired.config import BACKEND_URL, GENERIC_FAILURE_MESSAGE
from makemehired.schemas.resume_document import ResumeDocument
from makemehired.schemas.submission_result import (
    GenerateResponse,
    SubmissionFailure,
    SubmissionResult,
    SubmissionSuccess,
)
from makemehired.services.artifact_handler import decode_binary
from makemehired.services.generation_client import GenerationError, request_generation
from makemehired.services.payload_normalizer import normalize
from makemehired.utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


Listener = Callable[[SubmissionState, Optional[SubmissionResult]], None]


def _to_success(response: GenerateResponse) -> SubmissionSuccess:
    """Decode the PDF up front so a malformed artifact fails the submission, not the download."""
    pdf_bytes = decode_binary(response.pdf_base64) if response.pdf_base64 else None
    return SubmissionSuccess(html=response.html, pdf_bytes=pdf_bytes, filename=response.filename)


class SubmissionController:
    """
    Owns the Idle -> Submitting -> Success/Failure -> Idle cycle.

    Every submit() takes a new generation number. Only the newest submission
    may publish its result; an older request that completes later is logged
    and dropped. Concurrent calls are not rejected, the front end disables its
    trigger while is_submitting is true.
    """

    def __init__(self, base_url: str = BACKEND_URL, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        self.client = client
        self.state = SubmissionState.IDLE
        self.result: Optional[SubmissionResult] = None
        self._generation = 0
        self._pending: Optional[int] = None
        self._listeners: List[Listener] = []

    @property
    def is_submitting(self) -> bool:
        return self._pending is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state changes; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: SubmissionState, result: Optional[SubmissionResult]) -> None:
        self.state = state
        self.result = result
        for listener in list(self._listeners):
            listener(state, result)

    @contextmanager
    def _submitting(self) -> Iterator[int]:
        """Mark a new submission in flight; released on every exit path."""
        self._generation += 1
        token = self._generation
        self._pending = token
        self._transition(SubmissionState.SUBMITTING, None)
        try:
            yield token
        finally:
            if self._pending == token:
                self._pending = None
                if self.state is SubmissionState.SUBMITTING:
                    # Left without an outcome (unexpected error): nothing to display
                    self._transition(SubmissionState.IDLE, None)

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    async def submit(self, doc: ResumeDocument) -> SubmissionResult:
        """
        Normalize doc, POST it once, and move to SUCCESS or FAILURE.
        Returns the result this call produced, even if a newer submission
        superseded it.
        """
        with self._submitting() as token:
            payload = normalize(doc)
            logger.info("Submitting CV #%s for %r to %s", token, payload.full_name, self.base_url)
            try:
                response = await request_generation(payload, base_url=self.base_url, client=self.client)
                result: SubmissionResult = _to_success(response)
            except GenerationError as e:
                logger.warning("Submission #%s failed: %s", token, e)
                result = SubmissionFailure(message=GENERIC_FAILURE_MESSAGE)
            except binascii.Error as e:
                logger.warning("Submission #%s returned a malformed PDF: %s", token, e)
                result = SubmissionFailure(message=GENERIC_FAILURE_MESSAGE)

            if not self._is_current(token):
                logger.info("Discarding stale result of submission #%s (latest is #%s)", token, self._generation)
                return result

            state = SubmissionState.SUCCESS if isinstance(result, SubmissionSuccess) else SubmissionState.FAILURE
            self._transition(state, result)
            logger.info("Submission #%s finished: %s", token, state.value)
            return result

    def dismiss(self) -> None:
        """Return from a displayed result to IDLE. Ignored while submitting."""
        if self.state in (SubmissionState.SUCCESS, SubmissionState.FAILURE):
            self._transition(SubmissionState.IDLE, None)
