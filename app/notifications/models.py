from enum import Enum
from typing import Optional

from pydantic import BaseModel


class NotificationType(str, Enum):
    FORUM_REPLY = "FORUM_REPLY"
    UPVOTE = "UPVOTE"
    EVENT_REMINDER = "EVENT_REMINDER"
    HEALTH_REMINDER = "HEALTH_REMINDER"
    EXPERT_ANSWER = "EXPERT_ANSWER"
    SYSTEM = "SYSTEM"


class NotificationCreateRequest(BaseModel):
    userId: str
    type: str
    title: str
    message: str
    link: Optional[str] = None


class NotificationUpdateRequest(BaseModel):
    isRead: Optional[bool] = None
