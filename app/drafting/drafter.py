"""AI-drafted labor complaint built from a consolidated evidence report."""

import json
from pathlib import Path
from typing import Any

from app.config.settings import Settings
from app.drafting.exceptions import UNREADABLE_DRAFT_MESSAGE, DraftingError
from app.drafting.fallback import fallback_draft
from app.drafting.models import ComplaintDraft
from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionConfigError, ExtractionError
from app.extraction.factory import ExtractorFactory
from app.extraction.models import Message, Violation
from app.extraction.parser import parse_response
from app.extraction.prompt_loader import COMPLAINT_PROMPT, load_prompt
from app.logging.logger import Log
from app.merge.serializer import ReportSerializer
from app.wage.overlay import DraftWageData

_PARTY_FIELDS = {
    "complainantName": "complainant_name",
    "complainantPhone": "complainant_phone",
    "complainantAddress": "complainant_address",
    "companyName": "company_name",
    "companyRep": "company_rep",
    "companyAddress": "company_address",
    "purpose": "purpose",
    "details": "details",
}


class ComplaintDrafter:
    """Drafts complaint sections through the same client and parser used for extraction."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient | None,
        model: str = "",
        temperature: float = 0.2,
        prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._prompt_template = load_prompt(COMPLAINT_PROMPT, prompt_path)

    def draft(
        self,
        violations: list[Violation],
        wage_data: DraftWageData,
        messages: list[Message],
    ) -> ComplaintDraft:
        """Generate a complaint draft.

        Raises:
            DraftingError: when the provider fails or its answer cannot be parsed.
        """
        if self._client is None:
            Log.warning("Drafting service not configured, returning fallback draft")
            return fallback_draft()

        prompt = self._build_prompt(violations, wage_data, messages)
        Log.debug(f"Complaint prompt:\n{prompt}")
        try:
            raw = self._client.create_completion(
                model=self._model,
                temperature=self._temperature,
                instruction=prompt,
                json_output=True,
            )
        except ExtractionError as exc:
            Log.error(f"Complaint drafting call failed: {exc}")
            raise DraftingError(str(exc)) from exc

        parsed = parse_response(raw)
        if parsed is None:
            Log.error("Complaint draft response could not be parsed")
            raise DraftingError("Unparseable draft response", UNREADABLE_DRAFT_MESSAGE)

        draft = self._build_draft(parsed.get("complaintData"))
        Log.info(f"Complaint drafted: {len(draft.details)} chars of details")
        return draft

    def _build_prompt(
        self,
        violations: list[Violation],
        wage_data: DraftWageData,
        messages: list[Message],
    ) -> str:
        serializer = ReportSerializer()
        return self._prompt_template.format(
            violations=json.dumps(
                [serializer.violation_to_dict(v) for v in violations], ensure_ascii=False
            ),
            wage_data=json.dumps(wage_data.to_payload(), ensure_ascii=False),
            messages=json.dumps(
                [serializer.message_to_dict(m) for m in messages], ensure_ascii=False
            ),
        )

    @staticmethod
    def _build_draft(raw: Any) -> ComplaintDraft:
        """Take each known field from the response only when it is a non-empty string."""
        if not isinstance(raw, dict):
            return ComplaintDraft()
        values: dict[str, Any] = {}
        for key, attr in _PARTY_FIELDS.items():
            value = raw.get(key)
            if isinstance(value, str) and value.strip():
                values[attr] = value
        attachments = raw.get("attachments")
        if isinstance(attachments, list):
            values["attachments"] = [a for a in attachments if isinstance(a, str)]
        return ComplaintDraft(**values)


def build_drafter(settings: Settings) -> ComplaintDrafter:
    """Build a ComplaintDrafter sharing the extraction provider configuration."""
    provider = settings.extraction_provider.lower()
    if not settings.drafting_enabled:
        return ComplaintDrafter(client=None)
    try:
        client = ExtractorFactory.create_client(settings)
    except ExtractionConfigError as exc:
        Log.warning(f"Drafting unavailable ({exc}); drafter will use the fallback draft")
        return ComplaintDrafter(client=None)
    return ComplaintDrafter(
        client=client,
        model=ExtractorFactory.resolve_model_name(provider, settings),
        temperature=ExtractorFactory.resolve_temperature(provider, settings),
    )
