"""Message keys for the resources shipped in app/locales."""

from infrastructure.i18n.models import MessageKeyEnum


class CommonKey(MessageKeyEnum):
    """Keys defined in locales/<language>/common.ftl."""

    WELCOME = "welcome"
    GREETING = "greeting"
    UNREAD_MESSAGES = "unread-messages"
    LANGUAGE_CHANGED = "language-changed"
    UNKNOWN_ERROR = "unknown-error"
