from app.analysis.exceptions import AnalysisError
from app.analysis.fallback import fallback_report
from app.config.settings import Settings
from app.extraction.exceptions import ExtractionConfigError
from app.extraction.factory import ExtractorFactory
from app.logging.logger import Log
from app.merge.merger import ResultMerger
from app.merge.models import ConsolidatedReport
from app.processor.exceptions import BatchFailedError, EmptyBatchError
from app.processor.file_processor import FileProcessor
from app.processor.models import EvidenceFile


class EvidenceAnalyzer:
    """Batch entry point: evidence files in, one ConsolidatedReport out.

    Pipeline: validate batch -> fan out extraction + parse -> merge.
    Without a processor (no extraction credentials) the fixed fallback
    report is returned instead.
    """

    def __init__(
        self,
        processor: FileProcessor | None,
        merger: ResultMerger,
        fail_when_all_files_fail: bool = False,
    ) -> None:
        self._processor = processor
        self._merger = merger
        self._fail_when_all_files_fail = fail_when_all_files_fail

    @property
    def uses_fallback(self) -> bool:
        return self._processor is None

    def analyze(self, files: list[EvidenceFile]) -> ConsolidatedReport:
        """Analyze a batch of evidence files.

        Raises:
            EmptyBatchError: if no files were submitted.
            BatchFailedError: if every file failed and the policy forbids an empty report.
            AnalysisError: on any other failure, carrying a generic user message.
        """
        if not files:
            raise EmptyBatchError("No evidence files submitted")

        if self._processor is None:
            Log.warning("Extraction service not configured, returning fallback report")
            return fallback_report()

        Log.info(f"Analyzing batch of {len(files)} evidence files")
        try:
            results = self._processor.process_all(files)
            if self._fail_when_all_files_fail and all(r is None for r in results):
                raise BatchFailedError(f"All {len(files)} evidence files failed")
            return self._merger.merge(results)
        except BatchFailedError:
            raise
        except Exception as exc:
            Log.exception(f"Evidence analysis failed: {exc}")
            raise AnalysisError(str(exc)) from exc


def build_analyzer(settings: Settings) -> EvidenceAnalyzer:
    """Build an EvidenceAnalyzer with all required adapters."""
    merger = ResultMerger()
    try:
        extractor = ExtractorFactory.create(settings)
    except ExtractionConfigError as exc:
        Log.warning(f"Extraction unavailable ({exc}); analyzer will use the fallback report")
        return EvidenceAnalyzer(processor=None, merger=merger)
    processor = FileProcessor(extractor, max_workers=settings.extraction_max_workers)
    return EvidenceAnalyzer(
        processor=processor,
        merger=merger,
        fail_when_all_files_fail=settings.extraction_fail_when_all_files_fail,
    )
