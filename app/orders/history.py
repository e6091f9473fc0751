from typing import Dict, List, Protocol

from app.schemas import Message

class ChatHistorySource(Protocol):
    """Where today's lunch channel messages and the user directory come from."""

    def get_todays_messages(self) -> List[Message]:
        """Today's messages in chronological order."""
        ...

    def get_user_directory(self) -> Dict[str, str]:
        """Author id to username."""
        ...
