"""Job application entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from domain.enums import ApplicationStatus


@dataclass
class JobApplication:
    """A worker's request to fill a posting."""

    job_id: UUID
    labor_id: str
    supervisor_id: str
    status: ApplicationStatus = ApplicationStatus.CONFIRMED
    id: UUID = field(default_factory=uuid4)
    applied_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.status = ApplicationStatus(self.status)

    @property
    def is_confirmed(self) -> bool:
        return self.status == ApplicationStatus.CONFIRMED

    def __str__(self) -> str:
        return f"JobApplication(job={self.job_id}, labor={self.labor_id}, status={self.status})"
