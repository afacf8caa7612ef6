# -*- coding: utf-8 -*-
"""
LINE Message Handler Module

Classifies incoming text messages and replies with the next step for the
detected intent. Ledger writes, quotes and trades are performed by other
services after classification.
"""

import logging
from linebot import LineBotApi
from linebot.models import MessageEvent, TextSendMessage

from smartcapital.line.formatters import format_reply
from smartcapital.parser import classify

logger = logging.getLogger(__name__)


def build_reply_text(user_message: str) -> str:
    """Classify one chat message and format the reply text."""
    intent = classify(user_message)
    logger.info(f"Classified message as {intent.type.value}")
    return format_reply(intent)


def handle_text_message(event: MessageEvent, line_bot_api: LineBotApi) -> None:
    """
    Handle text message main flow

    Flow:
    1. Receive user message
    2. Classify into a single intent
    3. Reply with the formatted next-step message

    Args:
        event: LINE MessageEvent
        line_bot_api: LINE Bot API client
    """
    user_message = event.message.text
    reply_token = event.reply_token
    user_id = event.source.user_id

    logger.info(f"Received message from user {user_id}: {user_message}")

    reply_text = build_reply_text(user_message)

    try:
        line_bot_api.reply_message(reply_token, TextSendMessage(text=reply_text))
        logger.info(f"Replied to user {user_id}")
    except Exception as e:
        logger.error(f"Failed to reply to user {user_id}: {e}")
        raise
