"""
Overall status aggregation.
"""

from typing import List, Tuple

from ..models import Status


class Overall:
    """
    Folds individual results into one overall status.

    Messages are kept in the order they were added. The summary line is set
    by the caller from the counters.
    """

    def __init__(self):
        self.oks = 0
        self.warnings = 0
        self.criticals = 0
        self.unknowns = 0
        self.summary = ""
        self._outputs: List[Tuple[Status, str]] = []

    def add(self, status: Status, message: str):
        """
        Add one result.

        Args:
            status: Result status
            message: Result message
        """
        if status == Status.OK:
            self.oks += 1
        elif status == Status.WARNING:
            self.warnings += 1
        elif status == Status.CRITICAL:
            self.criticals += 1
        else:
            self.unknowns += 1

        self._outputs.append((status, message))

    def get_status(self) -> Status:
        """
        Get the overall status.

        CRITICAL beats WARNING. Without either the run is OK when at least one
        record was evaluated, UNKNOWN results (device classes without data)
        stay in the output but do not change the status. UNKNOWN when no record
        was added at all.
        """
        if self.criticals > 0:
            return Status.CRITICAL
        if self.warnings > 0:
            return Status.WARNING
        if self.oks > 0:
            return Status.OK
        return Status.UNKNOWN

    def get_outputs(self) -> List[Tuple[Status, str]]:
        return list(self._outputs)

    def render(self, prefix: str = "") -> str:
        """
        Render the summary line followed by one line per result.

        Args:
            prefix: Prepended to the summary line (e.g. "[OK] - ")

        Returns:
            Multi-line output, results in add order
        """
        lines = []
        if self.summary:
            lines.append(f"{prefix}{self.summary}")

        for status, message in self._outputs:
            lines.append(f"[{status.label}] {message}")

        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._outputs)
