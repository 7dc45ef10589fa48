"""Tests for the concurrent per-file fan-out."""

import threading
import time
from collections.abc import Callable
from unittest.mock import MagicMock, patch

from app.extraction.exceptions import ExtractionNetworkError
from app.extraction.extractor import Extractor
from app.extraction.models import ExtractedRecord
from app.processor.file_processor import FileProcessor
from app.processor.models import EvidenceFile


def _files(n: int) -> list[EvidenceFile]:
    return [EvidenceFile(name=f"shot_{i}.png", content=b"x", mime_type="image/png") for i in range(n)]


def _message_json(text: str) -> str:
    return '{"messages": [{"id": "1", "text": "%s"}]}' % text


def _extractor(side_effect: Callable[[EvidenceFile, int], str]) -> MagicMock:
    extractor = MagicMock(spec=Extractor)
    extractor.extract.side_effect = side_effect
    return extractor


class TestOrdering:
    def test_results_match_input_length_and_order(self) -> None:
        processor = FileProcessor(_extractor(lambda f, i: _message_json(f.name)), max_workers=4)
        results = processor.process_all(_files(5))
        assert len(results) == 5
        assert [r.messages[0].text for r in results if r is not None] == [
            f"shot_{i}.png" for i in range(5)
        ]

    def test_completion_order_does_not_affect_result_order(self) -> None:
        def slow_first(file: EvidenceFile, index: int) -> str:
            time.sleep(0.05 * (3 - index))
            return _message_json(str(index))

        results = FileProcessor(_extractor(slow_first), max_workers=3).process_all(_files(3))
        assert [r.messages[0].text for r in results if r is not None] == ["0", "1", "2"]

    def test_empty_batch_returns_empty_list(self) -> None:
        extractor = _extractor(lambda f, i: "{}")
        assert FileProcessor(extractor).process_all([]) == []
        extractor.extract.assert_not_called()


class TestFailureIsolation:
    def test_extraction_error_yields_none_at_index(self) -> None:
        def flaky(file: EvidenceFile, index: int) -> str:
            if index == 1:
                raise ExtractionNetworkError("timeout")
            return _message_json(str(index))

        results = FileProcessor(_extractor(flaky)).process_all(_files(3))
        assert results[1] is None
        assert results[0] is not None and results[2] is not None

    def test_unexpected_exception_is_isolated(self) -> None:
        def broken(file: EvidenceFile, index: int) -> str:
            if index == 0:
                raise RuntimeError("boom")
            return _message_json("ok")

        results = FileProcessor(_extractor(broken)).process_all(_files(2))
        assert results[0] is None
        assert results[1] is not None

    def test_parse_failure_yields_none(self) -> None:
        def prose(file: EvidenceFile, index: int) -> str:
            return "Sorry, I cannot help." if index == 2 else _message_json("ok")

        results = FileProcessor(_extractor(prose)).process_all(_files(3))
        assert [r is None for r in results] == [False, False, True]

    def test_parser_exception_is_isolated(self) -> None:
        def fragile_parse(raw: str) -> dict[str, object]:
            if raw == _message_json("bad"):
                raise ValueError("Exceeds the limit for integer string conversion")
            return {"messages": [{"id": "1", "text": "ok"}]}

        extractor = _extractor(lambda f, i: _message_json("bad" if i == 1 else "ok"))
        with patch("app.processor.file_processor.parse_response", side_effect=fragile_parse):
            results = FileProcessor(extractor).process_all(_files(3))
        assert [r is None for r in results] == [False, True, False]

    def test_record_builder_exception_is_isolated(self) -> None:
        def fragile_build(parsed: dict[str, object]) -> ExtractedRecord:
            if parsed["messages"][0]["text"] == "0":  # type: ignore[index]
                raise OverflowError("int too large to convert to float")
            return ExtractedRecord()

        extractor = _extractor(lambda f, i: _message_json(str(i)))
        with patch("app.processor.file_processor.build_record", side_effect=fragile_build):
            results = FileProcessor(extractor).process_all(_files(3))
        assert results[0] is None
        assert results[1] == ExtractedRecord() and results[2] == ExtractedRecord()

    def test_number_too_large_for_float_is_dropped_not_fatal(self) -> None:
        def huge_salary(file: EvidenceFile, index: int) -> str:
            if index == 1:
                return '{"wageData": {"baseSalary": 1' + "0" * 400 + "}}"
            return _message_json(str(index))

        results = FileProcessor(_extractor(huge_salary)).process_all(_files(3))
        assert results[1] is not None
        assert results[1].wage_data.base_salary is None
        assert results[0] is not None and results[2] is not None

    def test_all_failures_return_all_none(self) -> None:
        def fail(file: EvidenceFile, index: int) -> str:
            raise ExtractionNetworkError("down")

        assert FileProcessor(_extractor(fail)).process_all(_files(3)) == [None, None, None]

    def test_failures_are_logged_per_file(self) -> None:
        def fail(file: EvidenceFile, index: int) -> str:
            raise ExtractionNetworkError("down")

        with patch("app.processor.file_processor.Log") as mock_log:
            FileProcessor(_extractor(fail)).process_all(_files(2))
        assert mock_log.warning.call_count == 2
        assert any("0/2" in c.args[0] for c in mock_log.info.call_args_list)


class TestConcurrency:
    def test_files_run_in_parallel(self) -> None:
        barrier = threading.Barrier(3, timeout=5)

        def wait_for_all(file: EvidenceFile, index: int) -> str:
            barrier.wait()
            return _message_json("ok")

        results = FileProcessor(_extractor(wait_for_all), max_workers=3).process_all(_files(3))
        assert all(r is not None for r in results)

    def test_waits_for_slow_files_after_early_failure(self) -> None:
        def mixed(file: EvidenceFile, index: int) -> str:
            if index == 0:
                raise ExtractionNetworkError("fast failure")
            time.sleep(0.05)
            return _message_json("slow")

        results = FileProcessor(_extractor(mixed)).process_all(_files(3))
        assert results[0] is None
        assert results[1] is not None and results[2] is not None

    def test_passes_file_and_index_to_extractor(self) -> None:
        extractor = _extractor(lambda f, i: "{}")
        files = _files(2)
        FileProcessor(extractor).process_all(files)
        called = sorted((c.args[1], c.args[0].name) for c in extractor.extract.call_args_list)
        assert called == [(0, "shot_0.png"), (1, "shot_1.png")]
