# src/huddle/api/v1/endpoints/messages.py
"""Chat room message endpoints for the Huddle API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.concurrency import run_in_threadpool

from huddle.api.v1.dependencies import CurrentClaimsDep, FeedServiceDep, SessionDep
from huddle.schemas.message import MessageCreate, MessageRecord, MessageSentResponse

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=list[MessageRecord])
async def list_messages(
    claims: CurrentClaimsDep,
    db: SessionDep,
    feed_service: FeedServiceDep,
) -> list[MessageRecord]:
    """Return the most recent messages, oldest first."""
    return await run_in_threadpool(feed_service.list_recent, db)


@router.post("", status_code=status.HTTP_200_OK, response_model=MessageSentResponse)
async def send_message(
    message_data: MessageCreate,
    claims: CurrentClaimsDep,
    db: SessionDep,
    feed_service: FeedServiceDep,
) -> MessageSentResponse:
    """Post a message as the authenticated user."""
    record = await run_in_threadpool(feed_service.post_message, db, claims, message_data.message)
    return MessageSentResponse(message="Message sent successfully", data=record)
