"""Owner of the current résumé snapshot for one editing session."""

from typing import Any, Callable, List, Optional

from makemehired.schemas.resume_document import ResumeDocument, new_document
from makemehired.utils.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[[ResumeDocument, int], None]
Edit = Callable[..., ResumeDocument]


class DocumentStore:
    """
    Holds the single writable reference to the session's ResumeDocument.

    apply() runs a document_editor function against the current snapshot and
    swaps in the result as one step, bumping `version` so observers can tell
    snapshots apart even when two are equal by value. Listeners receive
    (document, version) after every successful edit.
    """

    def __init__(self, document: Optional[ResumeDocument] = None):
        self._document = document if document is not None else new_document()
        self._version = 0
        self._listeners: List[Listener] = []

    @property
    def document(self) -> ResumeDocument:
        return self._document

    @property
    def version(self) -> int:
        return self._version

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply(self, edit: Edit, *args: Any) -> ResumeDocument:
        """
        Replace the snapshot with edit(current, *args).
        If the edit raises, the snapshot and version are left as they were.
        """
        updated = edit(self._document, *args)
        if not isinstance(updated, ResumeDocument):
            raise TypeError(f"{getattr(edit, '__name__', edit)!r} did not return a ResumeDocument")
        self._swap(updated)
        logger.debug("Applied %s%s -> version %s", getattr(edit, "__name__", "edit"), args, self._version)
        return updated

    def reset(self) -> ResumeDocument:
        """Start over from the all-empty snapshot."""
        self._swap(new_document())
        logger.debug("Document reset -> version %s", self._version)
        return self._document

    def _swap(self, document: ResumeDocument) -> None:
        self._document = document
        self._version += 1
        for listener in list(self._listeners):
            listener(document, self._version)
