"""
Chat Service - Assembles the patient context and relays questions to the AI gateway.
"""
from typing import Dict, List
import json
import logging
from sqlalchemy.orm import Session

from ..patients.schemas import PatientWithRecords
from ..patients.service import list_patients_with_records
from .client import AIGatewayClient
from .prompts import build_system_prompt

# Set up logging
logger = logging.getLogger(__name__)

def build_patient_context(db: Session) -> str:
    """
    Serialise every patient, with nested medical records, admission and
    billing, as indented JSON text.
    """
    patients = list_patients_with_records(db)
    payload = [PatientWithRecords.model_validate(p).model_dump(mode="json") for p in patients]
    logger.info(f"Built assistant context from {len(payload)} patients")
    return json.dumps(payload, indent=2)

def build_messages(system_prompt: str, message: str) -> List[Dict[str, str]]:
    """Two-message conversation: system prompt, then the user's question."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": message},
    ]

async def answer_question(db: Session, client: AIGatewayClient, message: str) -> str:
    """
    Answer a free-text question about the patients.

    Args:
        db: Database session
        client: Gateway client
        message: The user's question

    Returns:
        str: The model's reply, unchanged

    Raises:
        Exception: Any database or gateway error propagates to the caller
    """
    system_prompt = build_system_prompt(build_patient_context(db))
    return await client.complete(build_messages(system_prompt, message))
