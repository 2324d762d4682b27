from typing import Iterator, List, Optional, Tuple

from roaster.errors import EmptyBatch, MissingHandoff


class Handoff:
    """
    Write-once, read-once carrier for a submitted todo list.

    Stands in for the session-scoped storage between the collection step
    and the results step.
    """

    def __init__(self):
        self._todos: Optional[List[str]] = None
        self._written = False

    def put(self, todos: List[str]) -> None:
        if self._written:
            raise RuntimeError("Handoff already holds a submitted batch")
        self._todos = list(todos)
        self._written = True

    def take(self) -> List[str]:
        if self._todos is None:
            raise MissingHandoff("No todos found")
        todos, self._todos = self._todos, None
        return todos


class TodoCollector:
    """Ordered list of todos, editable until it is submitted"""

    EDITING = "editing"
    SUBMITTING = "submitting"
    HANDED_OFF = "handed_off"

    def __init__(self):
        self.todos: List[str] = []
        self.state = self.EDITING

    def __len__(self) -> int:
        return len(self.todos)

    def _check_editable(self):
        if self.state != self.EDITING:
            raise RuntimeError(f"Todos can't be changed once {self.state}")

    def add(self, text: str) -> None:
        self._check_editable()
        text = text.strip()
        if text:
            self.todos.append(text)

    def add_bulk(self, text: str) -> None:
        """Append one todo per non-blank line of pasted text"""
        self._check_editable()
        self.todos.extend(line.strip() for line in text.splitlines() if line.strip())

    def remove(self, index: int) -> None:
        self._check_editable()
        if not 0 <= index < len(self.todos):
            raise IndexError(f"No todo at position {index}")
        del self.todos[index]

    def numbered(self) -> Iterator[Tuple[int, str]]:
        return enumerate(self.todos, start=1)

    def submit(self, handoff: Handoff) -> None:
        if not self.todos:
            raise EmptyBatch("Add at least one todo first!")

        self.state = self.SUBMITTING
        try:
            handoff.put(self.todos)
        except Exception:
            self.state = self.EDITING
            raise
        self.state = self.HANDED_OFF
