"""
Client package exports.
"""
from client.attachments import Attachment, AttachmentError, load_upload, from_recording
from client.session_manager import ChatSessionManager, generate_chat_title

__all__ = [
    'Attachment',
    'AttachmentError',
    'load_upload',
    'from_recording',
    'ChatSessionManager',
    'generate_chat_title'
]
