"""
Use case: Free-form chat with the AI assistant.

Input: ChatCommand (message, history of user/assistant turns)
Output: ChatReply
Side effects: One LLM call in JSON mode.
Failure cases: LLMNotConfiguredError, LLMRequestError, LLMResponseParseError.

The system prompt keeps the assistant educational: no specific buy/sell
recommendations.
"""

import logging

from app.application.advisor.dtos import ChatCommand
from app.domain.advisor.entities import ChatMessage, ChatReply, ChatRole
from app.domain.advisor.ports import LLMPort, PromptCatalog
from app.domain.advisor.responses import parse_chat_reply

logger = logging.getLogger(__name__)

# the client cannot inject system messages into the history
_HISTORY_ROLES = {ChatRole.USER.value: ChatRole.USER, ChatRole.ASSISTANT.value: ChatRole.ASSISTANT}


class ChatUseCase:
    def __init__(self, llm: LLMPort, prompts: PromptCatalog) -> None:
        self._llm = llm
        self._prompts = prompts

    def execute(self, command: ChatCommand) -> ChatReply:
        """Run one chat turn.

        Args:
            command: The new message and the prior turns, oldest first.

        Returns:
            The assistant's reply.
        """
        messages = [ChatMessage(ChatRole.SYSTEM, self._prompts.system("chat"))]
        messages.extend(
            ChatMessage(_HISTORY_ROLES[turn.role], turn.content)
            for turn in command.history
            if turn.role in _HISTORY_ROLES
        )
        messages.append(ChatMessage(ChatRole.USER, command.message))

        logger.info("Chat turn with %d prior messages", len(command.history))
        return parse_chat_reply(self._llm.complete_json(messages))
