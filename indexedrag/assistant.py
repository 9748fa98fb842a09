"""
Assistant Stub

Simulated assistant replies. No model or network endpoint is contacted.
"""

from typing import List, Dict
from loguru import logger

from .models import Message, Conversation


STUB_REPLY_TEMPLATE = "(Stub) LLM Response to: '{}'"


def build_request_payload(messages: List[Message]) -> List[Dict[str, str]]:
    """
    Build the chat-completion style message list an LLM endpoint would receive

    Args:
        messages: Conversation history including the newest user message

    Returns:
        JSON-compatible list of {"role", "content"} dicts
    """
    return [m.to_dict() for m in messages]


class StubAssistant:
    """Answers every prompt with a fixed echo string"""

    def reply(self, user_input: str) -> str:
        return STUB_REPLY_TEMPLATE.format(user_input)

    def respond(self, conversation: Conversation, user_input: str) -> Message:
        """Append the stub reply to the conversation and return it"""
        payload = build_request_payload(conversation.messages)
        logger.debug(f"🤖 Stub reply for {len(payload)} message(s) of history")

        message = Message(role="assistant", content=self.reply(user_input))
        conversation.messages.append(message)
        return message
