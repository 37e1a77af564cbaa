import enum
from typing import Optional

IOS_DEVICE_MARKERS = ("iphone", "ipad", "ipod")


class Platform(str, enum.Enum):
    ANDROID = "android"
    IOS = "ios"
    OTHER = "other"


def classify(user_agent: Optional[str]) -> Platform:
    """
    Classify a User-Agent header into the platform it declares.

    Android is checked first, so an agent mentioning both wins as Android.
    Anything unrecognised (including a missing header) is OTHER, which
    only ever costs the caller a landing page instead of a broken redirect.
    """
    agent = (user_agent or "").lower()

    if "android" in agent:
        return Platform.ANDROID
    if any(marker in agent for marker in IOS_DEVICE_MARKERS):
        return Platform.IOS
    return Platform.OTHER
