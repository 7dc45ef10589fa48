"""Concurrent fan-out of extraction + parsing over a batch of evidence files."""

from concurrent.futures import ThreadPoolExecutor

from app.extraction.extractor import Extractor
from app.extraction.models import ExtractedRecord
from app.extraction.parser import parse_response
from app.extraction.record_builder import build_record
from app.logging.logger import Log
from app.processor.models import EvidenceFile


class FileProcessor:
    """Runs every file's pipeline independently and returns results in submission order.

    Each worker writes only its own slot, so no locking is needed. A failure
    in one file (provider error, timeout, unparseable text) leaves None at
    that index and never affects the others.
    """

    def __init__(self, extractor: Extractor, max_workers: int = 4) -> None:
        self._extractor = extractor
        self._max_workers = max(1, max_workers)

    def process_all(self, files: list[EvidenceFile]) -> list[ExtractedRecord | None]:
        if not files:
            return []
        workers = min(self._max_workers, len(files))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="evidence") as pool:
            futures = [
                pool.submit(self._process_one, file, index)
                for index, file in enumerate(files)
            ]
            # Collected by index, not completion order.
            results = [future.result() for future in futures]

        succeeded = sum(1 for result in results if result is not None)
        Log.info(f"Processed evidence batch: {succeeded}/{len(files)} files succeeded")
        return results

    def _process_one(self, file: EvidenceFile, index: int) -> ExtractedRecord | None:
        try:
            raw = self._extractor.extract(file, index)
            parsed = parse_response(raw)
            if parsed is None:
                Log.warning(f"Unparseable response for file #{index} '{file.name}'")
                return None
            return build_record(parsed)
        except Exception as exc:
            Log.warning(f"Processing failed for file #{index} '{file.name}': {exc}")
            return None
