from typing import Any, Literal, Optional, Union
from pydantic import BaseModel

from subscribe_api.utils.email_utils import clean_text, truncate_reason, sanitize_phone

class SubscriptionRequest(BaseModel):
    email: str
    name: str = ""
    company: str = ""
    phone: str = ""
    reason: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "SubscriptionRequest":
        """Build from a decoded JSON body. Anything that is not an object counts as empty."""
        body = payload if isinstance(payload, dict) else {}
        email = body.get("email")
        return cls(
            email=email.strip() if isinstance(email, str) else "",
            name=clean_text(body.get("name")),
            company=clean_text(body.get("company")),
            phone=clean_text(body.get("phone")),
            reason=truncate_reason(clean_text(body.get("reason"))),
        )

    def extra_fields(self) -> dict[str, str]:
        fields: dict[str, str] = {}
        if self.name:
            fields["name"] = self.name
        if self.company:
            fields["company"] = self.company
        phone = sanitize_phone(self.phone)
        if phone:
            fields["phone"] = phone
        if self.reason:
            fields["reason"] = self.reason
        return fields

class SubscribeOk(BaseModel):
    ok: Literal[True] = True

class SubscribeErr(BaseModel):
    ok: Literal[False] = False
    message: str
    errors: Optional[Any] = None

    def to_body(self) -> dict:
        body: dict[str, Any] = {"ok": False, "message": self.message}
        if "errors" in self.model_fields_set:
            body["errors"] = self.errors
        return body

SubscriptionResult = Union[SubscribeOk, SubscribeErr]
