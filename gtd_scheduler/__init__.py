"""GTD task manager: automatic day scheduling service."""
