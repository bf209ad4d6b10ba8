"""Constants for Item document field names"""


class ItemFields:
    """Field name constants for Item model"""
    ID = "id"
    UPLOADED_AT = "uploaded_at"
    UPDATED_AT = "updated_at"

    # Tag set (set once at ingestion)
    CATEGORY = "category"
    AGE_RANGES = "age_ranges"
    THEMES = "themes"
    KEYWORDS = "keywords"
    DESCRIPTION = "description"
    DETECTED_TEXT = "detected_text"
    DOMINANT_COLORS = "dominant_colors"
    CONFIDENCE_SCORES = "confidence_scores"

    # Administrative fields (mutable)
    LOCATION = "location"
    CONDITION = "condition"
    NOTES = "notes"
    AVAILABILITY = "availability"

    PHOTOS = "photos"
    GIFT_HISTORY = "gift_history"

    # MongoDB specific
    MONGO_ID = "_id"
    TEXT_SCORE = "text_score"


class PhotoFields:
    """Field name constants for embedded Photo documents"""
    PHOTO_ID = "photo_id"
    FILE_PATH = "file_path"
    FILE_NAME = "file_name"
    IS_PRIMARY = "is_primary"
    UPLOADED_AT = "uploaded_at"


class GiftFields:
    """Field name constants for embedded gift history records"""
    GIFTED_AT = "gifted_at"
    RECIPIENT_NAME = "recipient_name"
    RECIPIENT_AGE = "recipient_age"
    OCCASION = "occasion"
    NOTES = "notes"
