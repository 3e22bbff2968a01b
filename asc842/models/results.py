from dataclasses import dataclass, field

from asc842.models.journal import JournalEntry
from asc842.models.lease import LeaseMetrics, ScheduleRow


@dataclass(frozen=True)
class LeaseCalculation:
    metrics: LeaseMetrics
    schedule: list[ScheduleRow] = field(default_factory=list)
    journal_entries: list[JournalEntry] = field(default_factory=list)

    @property
    def initial_entry(self) -> JournalEntry:
        return self.journal_entries[0]

    @property
    def monthly_entries(self) -> list[JournalEntry]:
        return self.journal_entries[1:]
