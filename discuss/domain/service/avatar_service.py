"""Avatar URL formatting."""

from discuss.config import CommentSettings

from .base import Service


class AvatarService(Service):
    """Formats gravatar URLs from the configured source and fallback image."""

    def __init__(self, comment_settings: CommentSettings) -> None:
        """Initialize avatar service.

        Args:
            comment_settings: Comment settings holding the gravatar source/default
        """
        self.comment_settings = comment_settings

    def build_avatar_url(self, gravatar_md5: str | None) -> str:
        """Build the avatar URL for an email hash."""
        source = self.comment_settings.gravatar_source
        default = self.comment_settings.gravatar_default
        return f"{source}{gravatar_md5 or ''}?s=256&d={default}"
