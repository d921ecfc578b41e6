from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class NotificationDetails(BaseModel):
    """Технические детали для раскрывающегося блока тоста."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    response_code: Optional[int] = Field(None, alias="responseCode")
    message: Any = None


class ErrorNotification(BaseModel):
    """Payload для errorToast(notification)."""
    model_config = ConfigDict(frozen=True)

    message: str
    details: NotificationDetails

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
