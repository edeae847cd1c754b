"""
Chat Router - The patient assistant endpoint.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..auth.dependencies import get_current_active_user
from ..auth.models import User
from .client import AIGatewayClient, get_ai_gateway_client
from .prompts import GREETING
from .schemas import ChatRequest, ChatResponse, ChatError
from .service import answer_question

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "",
    response_model=ChatResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ChatError}},
)
async def chat(
    chat_request: ChatRequest,
    db: Session = Depends(get_db),
    client: AIGatewayClient = Depends(get_ai_gateway_client),
    current_user: User = Depends(get_current_active_user)
):
    """
    Ask the assistant a question about patients

    The whole patient table, with medical, admission and billing rows, is
    sent to the model as context. Any failure returns 500 with an error body.
    """
    try:
        reply = await answer_question(db, client, chat_request.message)
    except Exception as e:
        logger.error(f"Error in patient chat: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e) or "Unknown error"},
        )
    return ChatResponse(response=reply)

@router.get("/greeting", response_model=ChatResponse)
async def greeting(current_user: User = Depends(get_current_active_user)):
    """Opening message shown when the chat panel opens"""
    return ChatResponse(response=GREETING)
