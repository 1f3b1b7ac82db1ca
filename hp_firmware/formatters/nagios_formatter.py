"""
Monitoring plugin formatter.

Output format:
[CRITICAL] - Found 1 critical problems
[OK] controller (0) model=p408i-a serial=PEYHB0ARH9Z0GD firmware=2.65 - firmware has been updated
[CRITICAL] physical drive (0.1) model=VO0480JFDGT serial=ABC123 firmware=HPD1 hours=1337 - affected by FW bug, ...
"""

import json

from .base_formatter import OutputFormatter
from ..services.check_service import CheckResults


class NagiosFormatter(OutputFormatter):
    """Icinga / Nagios compatible plugin output"""

    def _format_text(self, results: CheckResults) -> str:
        """Status prefixed summary line followed by one line per result"""
        return results.overall.render(prefix=f"[{results.status.label}] - ")

    def _format_json(self, results: CheckResults) -> str:
        output = {
            "status": results.status.label,
            "exit_code": results.status.value,
            "summary": results.overall.summary,
            "controllers": results.controller_count,
            "drives": results.drive_count,
            "results": [
                {"status": status.label, "message": message}
                for status, message in results.overall.get_outputs()
            ]
        }
        return json.dumps(output, indent=2)
