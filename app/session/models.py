from dataclasses import dataclass, field
from enum import Enum

from app.drafting.models import ComplaintDraft
from app.merge.models import ConsolidatedReport
from app.processor.models import EvidenceFile
from app.wage.models import WageBreakdown, WageInputs


class Stage(str, Enum):
    UPLOADED = "uploaded"
    ANALYZED = "analyzed"
    DRAFTED = "drafted"
    FILED = "filed"
    DONE = "done"


@dataclass(slots=True)
class CaseSession:
    """Request-scoped state of one case, passed explicitly between transitions."""

    files: list[EvidenceFile]
    stage: Stage = Stage.UPLOADED
    report: ConsolidatedReport | None = None
    wage_inputs: WageInputs = field(default_factory=WageInputs)
    wage_breakdown: WageBreakdown | None = None
    draft: ComplaintDraft | None = None
    error_message: str = ""
