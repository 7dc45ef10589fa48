from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ComplaintDraft:
    """Generated complaint sections plus the party details the user fills in later."""

    complainant_name: str = "홍길동"
    complainant_phone: str = "010-0000-0000"
    complainant_address: str = "서울특별시 ㅇㅇ구 ㅇㅇ동"
    company_name: str = "(주)ㅇㅇㅇ"
    company_rep: str = "김대표"
    company_address: str = "서울특별시 ㅇㅇ구 ㅇㅇ동 사업장"
    purpose: str = ""
    details: str = ""
    attachments: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        data = asdict(self)
        return {
            "complaintData": {
                "complainantName": data["complainant_name"],
                "complainantPhone": data["complainant_phone"],
                "complainantAddress": data["complainant_address"],
                "companyName": data["company_name"],
                "companyRep": data["company_rep"],
                "companyAddress": data["company_address"],
                "purpose": data["purpose"],
                "details": data["details"],
                "attachments": data["attachments"],
            }
        }
