import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from app.analysis.analyzer import build_analyzer
from app.analysis.exceptions import AnalysisError
from app.config.settings import Settings
from app.drafting.drafter import build_drafter
from app.drafting.exceptions import DraftingError
from app.logging.logger import Log
from app.merge.serializer import ReportSerializer
from app.processor.exceptions import ProcessorError
from app.processor.file_loader import FileLoader
from app.session.models import CaseSession
from app.session.workflow import CaseWorkflow
from app.wage.models import WageInputs


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="laborcase",
        description="Extract and merge labor-dispute evidence into one report.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="evidence files, in submission order")
    parser.add_argument("--base-salary", type=float, default=None)
    parser.add_argument("--overtime-hours", type=float, default=None)
    parser.add_argument("--night-hours", type=float, default=None)
    parser.add_argument("--holiday-hours", type=float, default=None)
    parser.add_argument("--draft", action="store_true", help="also draft the complaint")
    return parser.parse_args(argv)


def _session_payload(session: CaseSession) -> dict[str, Any]:
    payload: dict[str, Any] = {"stage": session.stage.value}
    if session.report is not None:
        payload["report"] = ReportSerializer().to_payload(session.report)
    if session.wage_breakdown is not None:
        payload["wageBreakdown"] = asdict(session.wage_breakdown)
    if session.draft is not None:
        payload.update(session.draft.to_payload())
    return payload


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> load files -> analyze -> (wages, draft) -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    workflow = CaseWorkflow(build_analyzer(settings), build_drafter(settings))
    try:
        files = FileLoader().load_all(args.files)
        session = workflow.analyze(workflow.start(files))
        inputs = WageInputs(
            base_salary=args.base_salary,
            overtime_hours=args.overtime_hours,
            night_hours=args.night_hours,
            holiday_hours=args.holiday_hours,
        )
        if inputs != WageInputs():
            workflow.update_wages(session, inputs)
        if args.draft:
            workflow.draft(session)
    except (AnalysisError, DraftingError) as exc:
        print(exc.user_message, file=sys.stderr)
        return 1
    except ProcessorError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(json.dumps(_session_payload(session), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
