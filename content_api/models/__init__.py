from content_api.models.category import CategoryStatus, CategoryItem, CategoryInfo, CategoryFull
from content_api.models.notification import ErrorNotification, NotificationDetails

__all__ = [
    "CategoryStatus",
    "CategoryItem",
    "CategoryInfo",
    "CategoryFull",
    "ErrorNotification",
    "NotificationDetails"
]
