"""
Bulk import of vocables from text.
"""

from dataclasses import dataclass, field

from vocab.core.parsing import parse_import_file
from vocab.core.resolver import DeclineResolver
from vocab.core.results import Outcome
from vocab.core.store import VocableStore


@dataclass
class ImportReport:
    added: int = 0
    rejected: list[tuple[int, Outcome]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "added": self.added,
            "rejected": [
                {"line": line_no, "reason": o.reason.value if o.reason else None, "message": o.message}
                for line_no, o in self.rejected
            ],
        }


def import_text(store: VocableStore, text: str, delimiter: str = "-", standard_order: bool = True) -> ImportReport:
    """
    Add one vocable per line. Merges are always declined, so a line that only
    overlaps an existing vocable becomes a new vocable.
    """
    lines = parse_import_file(text, delimiter, standard_order)
    report = ImportReport()
    resolver = DeclineResolver()
    for line in lines:
        outcome = store.add(line.native, line.foreign, resolver)
        if outcome.ok:
            report.added += 1
        else:
            report.rejected.append((line.line_no, outcome))
    return report
