from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from cardsmith.apis.deps import get_flashcards_generator
from cardsmith.core.config import settings
from cardsmith.core.exceptions import (
    EmptyResponseError,
    EmptyTopicError,
    ExportError,
    FileImportError,
    GenerationError,
    GenerationInProgressError,
    NoFlashcardsError,
)
from cardsmith.core.logging import get_logger
from cardsmith.modules.flashcards.export import CSV_FILENAME, CSV_MEDIA_TYPE, to_csv
from cardsmith.modules.flashcards.importer import decode_text, loaded_message
from cardsmith.modules.flashcards.main import FlashcardsGenerator
from cardsmith.modules.flashcards.parser import parse_flashcards
from cardsmith.modules.flashcards.prompts import build_prompt, prompt_kind
from .schemas import (
    ExportRequest,
    GenerateRequest,
    GenerateResponse,
    ImportResponse,
    ParseRequest,
    ParseResponse,
    PromptRequest,
    PromptResponse,
)


logger = get_logger(__name__)

router = APIRouter()

Generator = Annotated[FlashcardsGenerator, Depends(get_flashcards_generator)]


@router.post(
    f"/{settings.app.version}/flashcards/generate",
    response_model=GenerateResponse,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def generate_flashcards(req: GenerateRequest, svc: Generator) -> GenerateResponse:
    try:
        result = await svc.generate(req.topic)
    except EmptyTopicError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except GenerationInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"An error occurred: {e.message}",
        )
    except EmptyResponseError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except NoFlashcardsError as e:
        raise HTTPException(status_code=422, detail=e.message)

    cards = result.flashcard_set.flashcards
    return GenerateResponse(
        topic=result.topic,
        prompt_kind=result.prompt_kind,
        model=result.model,
        flashcards=cards,
        count=len(cards),
    )


@router.post(
    f"/{settings.app.version}/flashcards/parse",
    response_model=ParseResponse,
    tags=["flashcards"],
)
async def parse_text(req: ParseRequest) -> ParseResponse:
    cards = parse_flashcards(req.text)
    return ParseResponse(flashcards=cards.flashcards, count=len(cards))


@router.post(
    f"/{settings.app.version}/flashcards/prompt",
    response_model=PromptResponse,
    tags=["flashcards"],
)
async def preview_prompt(req: PromptRequest) -> PromptResponse:
    topic = req.topic.strip()
    if not topic:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=EmptyTopicError().message
        )
    return PromptResponse(prompt_kind=prompt_kind(topic), prompt=build_prompt(topic))


@router.post(
    f"/{settings.app.version}/flashcards/export",
    tags=["flashcards"],
    response_class=Response,
)
async def export_csv(req: ExportRequest) -> Response:
    try:
        content = to_csv(req.flashcards)
    except ExportError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.post(
    f"/{settings.app.version}/flashcards/import",
    response_model=ImportResponse,
    tags=["flashcards"],
)
async def import_file(file: UploadFile = File(...)) -> ImportResponse:
    filename = file.filename or "upload.txt"
    try:
        data = await file.read()
        text = decode_text(data, filename=filename)
    except FileImportError as e:
        logger.warning("Import of %s failed: %s", filename, e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    finally:
        await file.close()
    return ImportResponse(filename=filename, text=text, message=loaded_message(filename))
