from app.analysis.analyzer import EvidenceAnalyzer
from app.analysis.exceptions import AnalysisError
from app.drafting.drafter import ComplaintDrafter
from app.drafting.exceptions import DraftingError
from app.logging.logger import Log
from app.processor.exceptions import ProcessorError
from app.processor.models import EvidenceFile
from app.session.exceptions import InvalidTransitionError
from app.session.models import CaseSession, Stage
from app.wage.calculator import calc_wage
from app.wage.models import WageInputs
from app.wage.overlay import overlay_wage_inputs


def _require_stage(session: CaseSession, expected: Stage, action: str) -> None:
    if session.stage is not expected:
        raise InvalidTransitionError(
            f"Cannot {action} from stage '{session.stage.value}' "
            f"(expected '{expected.value}')"
        )


class CaseWorkflow:
    """Explicit stage transitions: uploaded -> analyzed -> drafted -> filed -> done.

    A failed transition leaves the session at its previous stage with
    ``error_message`` set, then re-raises.
    """

    def __init__(self, analyzer: EvidenceAnalyzer, drafter: ComplaintDrafter) -> None:
        self._analyzer = analyzer
        self._drafter = drafter

    def start(self, files: list[EvidenceFile]) -> CaseSession:
        return CaseSession(files=list(files))

    def analyze(self, session: CaseSession) -> CaseSession:
        _require_stage(session, Stage.UPLOADED, "analyze")
        session.error_message = ""
        try:
            session.report = self._analyzer.analyze(session.files)
        except AnalysisError as exc:
            session.error_message = exc.user_message
            raise
        except ProcessorError as exc:
            session.error_message = str(exc)
            raise
        session.stage = Stage.ANALYZED
        Log.info(
            f"Session analyzed: {len(session.report.violations)} violations, "
            f"{len(session.report.messages)} messages"
        )
        return session

    def update_wages(self, session: CaseSession, inputs: WageInputs) -> CaseSession:
        """Store the user's wage figures and recompute the breakdown; the report is untouched."""
        _require_stage(session, Stage.ANALYZED, "update wages")
        session.wage_inputs = inputs
        session.wage_breakdown = calc_wage(inputs)
        return session

    def draft(self, session: CaseSession) -> CaseSession:
        _require_stage(session, Stage.ANALYZED, "draft")
        if session.report is None:
            raise InvalidTransitionError("Cannot draft a session without a report")
        session.error_message = ""
        wage_data = overlay_wage_inputs(
            session.report.wage_data, session.wage_inputs, session.wage_breakdown
        )
        try:
            session.draft = self._drafter.draft(
                session.report.violations, wage_data, session.report.messages
            )
        except DraftingError as exc:
            session.error_message = exc.user_message
            raise
        session.stage = Stage.DRAFTED
        return session

    def mark_filed(self, session: CaseSession) -> CaseSession:
        _require_stage(session, Stage.DRAFTED, "mark as filed")
        session.stage = Stage.FILED
        return session

    def complete(self, session: CaseSession) -> CaseSession:
        _require_stage(session, Stage.FILED, "complete")
        session.stage = Stage.DONE
        return session
