# ---
# File: notifications/routes.py
# Purpose: FastAPI routes for listing, counting, creating, marking and deleting a user's notifications
# ---

from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging
import math

from app.auth.dependencies import require_user
from app.db import get_db
from app.notifications.models import (
    NotificationCreateRequest,
    NotificationType,
    NotificationUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])

VALID_TYPES = {t.value for t in NotificationType}

# ---
# Fetch a notification owned by the given user.
# Raises 404 both when it does not exist and when it belongs to someone else.
# ---
async def _get_owned_notification(db, notification_id: str, user_id: str):
    notification = await db.notification.find_unique(where={"id": notification_id})
    if not notification or notification.userId != user_id:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification

# ---
# List the current user's notifications, newest first.
# Filters: type ("all" = any), isRead ("true" / "false" / "all").
# Pagination via page (1-based) and limit.
# ---
@router.get("")
async def list_notifications(
    type: Optional[str] = Query(None),
    isRead: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1),
    user=Depends(require_user),
    db=Depends(get_db),
):
    where = {"userId": user.id}
    if type and type != "all":
        where["type"] = type
    if isRead is not None and isRead != "all":
        where["isRead"] = isRead == "true"

    try:
        notifications = await db.notification.find_many(
            where=where,
            order={"createdAt": "desc"},
            skip=(page - 1) * limit,
            take=limit,
        )
        total = await db.notification.count(where=where)
        unread_count = await db.notification.count(where={"userId": user.id, "isRead": False})
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][LIST][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch notifications")

    return {
        "success": True,
        "data": notifications,
        "unreadCount": unread_count,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }

# ---
# Internal endpoint used by other features to notify a user.
# ---
@router.post("", status_code=status.HTTP_201_CREATED)
async def create_notification(data: NotificationCreateRequest, db=Depends(get_db)):
    if not (data.userId and data.type and data.title and data.message):
        raise HTTPException(status_code=400, detail="Missing required fields")
    if data.type not in VALID_TYPES:
        raise HTTPException(status_code=400, detail="Invalid notification type")

    try:
        notification = await db.notification.create(data={
            "userId": data.userId,
            "type": data.type,
            "title": data.title,
            "message": data.message,
            "link": data.link or None,
        })
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][CREATE][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create notification")

    logger.info(f"[NOTIFICATIONS] Created {data.type} notification {notification.id} for {data.userId}")
    return {"success": True, "data": notification}

# ---
# Number of unread notifications of the current user.
# ---
@router.get("/count")
async def get_unread_count(user=Depends(require_user), db=Depends(get_db)):
    try:
        count = await db.notification.count(where={"userId": user.id, "isRead": False})
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][COUNT][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to get notification count")

    return {"success": True, "data": {"count": count}}

# ---
# Mark every unread notification of the current user as read.
# Other users' notifications are never touched.
# ---
@router.post("/read-all")
async def mark_all_read(user=Depends(require_user), db=Depends(get_db)):
    try:
        updated = await db.notification.update_many(
            where={"userId": user.id, "isRead": False},
            data={"isRead": True},
        )
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][READ-ALL][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to mark notifications as read")

    logger.info(f"[NOTIFICATIONS] Marked {updated} notifications read for {user.id}")
    return {
        "success": True,
        "message": "All notifications marked as read",
        "data": {"count": updated},
    }

# ---
# Set isRead on one notification; when isRead is omitted the flag is toggled.
# ---
@router.patch("/{notification_id}")
async def update_notification(
    notification_id: str,
    data: Optional[NotificationUpdateRequest] = None,
    user=Depends(require_user),
    db=Depends(get_db),
):
    try:
        notification = await _get_owned_notification(db, notification_id, user.id)
        is_read = data.isRead if data and data.isRead is not None else not notification.isRead
        updated = await db.notification.update(
            where={"id": notification_id},
            data={"isRead": is_read},
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][UPDATE][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update notification")

    return {"success": True, "data": updated}


@router.delete("/{notification_id}")
async def delete_notification(notification_id: str, user=Depends(require_user), db=Depends(get_db)):
    try:
        await _get_owned_notification(db, notification_id, user.id)
        await db.notification.delete(where={"id": notification_id})
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[NOTIFICATIONS][DELETE][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete notification")

    return {"success": True, "message": "Notification deleted"}
