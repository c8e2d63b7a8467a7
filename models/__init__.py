"""
Models package exports.
"""
from models.api_models import HistoryMessage, ChatResponse, ErrorResponse
from models.chat_models import ResponseType, Role, SpeechResult, Media, Message, Chat

__all__ = [
    'HistoryMessage',
    'ChatResponse',
    'ErrorResponse',
    'ResponseType',
    'Role',
    'SpeechResult',
    'Media',
    'Message',
    'Chat'
]
