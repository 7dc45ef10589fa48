import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from app.config.settings import Settings
from app.drafting.drafter import ComplaintDrafter, build_drafter
from app.drafting.exceptions import UNREADABLE_DRAFT_MESSAGE, DraftingError
from app.drafting.models import ComplaintDraft
from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionNetworkError
from app.extraction.models import Message, Violation
from app.wage.overlay import DraftWageData


def _client(response: str) -> MagicMock:
    client = MagicMock(spec=BaseExtractionClient)
    client.create_completion.return_value = response
    return client


def _draft(drafter: ComplaintDrafter) -> ComplaintDraft:
    return drafter.draft(
        [Violation(type="wage_theft", name="임금체불")],
        DraftWageData(base_salary=2500000, overtime_hours=15, calculated_amount=269122),
        [Message(id="1", text="야근수당은 없어.")],
    )


class TestDraft:
    def test_prompt_embeds_serialized_inputs(self, tmp_path: Path) -> None:
        template = tmp_path / "complaint.txt"
        template.write_text("V={violations}\nW={wage_data}\nM={messages}", encoding="utf-8")
        client = _client('{"complaintData": {}}')

        _draft(ComplaintDrafter(client=client, model="m", prompt_path=template))

        prompt = client.create_completion.call_args.kwargs["instruction"]
        violations_line, wage_line, messages_line = prompt.splitlines()
        assert json.loads(violations_line[2:])[0]["name"] == "임금체불"
        assert json.loads(wage_line[2:])["calculatedAmount"] == 269122
        assert json.loads(messages_line[2:])[0]["text"] == "야근수당은 없어."
        assert client.create_completion.call_args.kwargs["json_output"] is True

    def test_builds_draft_from_response(self) -> None:
        client = _client(
            "```json\n"
            + json.dumps(
                {
                    "complaintData": {
                        "purpose": "미지급 수당 지급",
                        "details": "1. 진정인은...",
                        "companyName": "(주)테스트",
                        "attachments": ["녹음 파일 1부", 3],
                    }
                },
                ensure_ascii=False,
            )
            + "\n```"
        )
        draft = _draft(ComplaintDrafter(client=client, model="m"))
        assert draft.purpose == "미지급 수당 지급"
        assert draft.details == "1. 진정인은..."
        assert draft.company_name == "(주)테스트"
        assert draft.attachments == ["녹음 파일 1부"]
        assert draft.complainant_name == "홍길동"

    def test_blank_fields_keep_defaults(self) -> None:
        client = _client('{"complaintData": {"companyName": "  ", "purpose": null}}')
        draft = _draft(ComplaintDrafter(client=client, model="m"))
        assert draft.company_name == ComplaintDraft().company_name
        assert draft.purpose == ""

    def test_missing_section_gives_default_draft(self) -> None:
        draft = _draft(ComplaintDrafter(client=_client('{"other": 1}'), model="m"))
        assert draft == ComplaintDraft()

    def test_unparseable_response_raises(self) -> None:
        drafter = ComplaintDrafter(client=_client("I cannot do that."), model="m")
        with pytest.raises(DraftingError) as exc_info:
            _draft(drafter)
        assert exc_info.value.user_message == UNREADABLE_DRAFT_MESSAGE

    def test_provider_error_raises(self) -> None:
        client = MagicMock(spec=BaseExtractionClient)
        client.create_completion.side_effect = ExtractionNetworkError("down")
        with pytest.raises(DraftingError, match="down"):
            _draft(ComplaintDrafter(client=client, model="m"))

    def test_without_client_returns_fallback(self) -> None:
        draft = _draft(ComplaintDrafter(client=None))
        assert draft.complainant_name == "최지훈"
        assert "269,122원" in draft.purpose


class TestComplaintDraftPayload:
    def test_payload_wraps_camel_case_section(self) -> None:
        payload = ComplaintDraft(purpose="p", attachments=["a"]).to_payload()
        section = payload["complaintData"]
        assert section["purpose"] == "p"
        assert section["complainantName"] == "홍길동"
        assert section["attachments"] == ["a"]


class TestBuildDrafter:
    def test_example_provider_drafts_offline(self) -> None:
        drafter = build_drafter(Settings(extraction_provider="example"))
        draft = _draft(drafter)
        assert draft.attachments == ["카카오톡 대화 캡처 1부"]
        assert draft.purpose.startswith("피진정인은")
        assert isinstance(drafter, ComplaintDrafter)

    def test_disabled_drafting_uses_fallback(self) -> None:
        drafter = build_drafter(Settings(extraction_provider="example", drafting_enabled=False))
        assert _draft(drafter).complainant_name == "최지훈"

    def test_missing_credentials_use_fallback(self) -> None:
        drafter = build_drafter(Settings(extraction_provider="gemini", extraction_gemini_api_key=""))
        assert _draft(drafter).company_name == "(주)샘플유통"
