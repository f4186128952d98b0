"""
Email generation API endpoints.

Generation never fails from the caller's point of view: if the generation
service is unavailable the pipeline returns a fallback email. The only
rejected requests are those without a subject or purpose.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logfire

from api.dependencies import get_email_pipeline
from pipeline.core.exceptions import ValidationError
from pipeline.core.runner import EmailPipelineRunner
from schemas.email import (
    EmailMetadataResponse,
    ErrorResponse,
    GenerateEmailRequest,
    GenerateEmailResponse,
)


router = APIRouter(tags=["Email Generation"])


@router.post(
    "/generate-email",
    response_model=GenerateEmailResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def generate_email(
    request: GenerateEmailRequest,
    pipeline: EmailPipelineRunner = Depends(get_email_pipeline),
):
    """
    Generate an email, falling back to a template when generation fails.

    Args:
        request: Email request (subject or purpose required)
        pipeline: Email pipeline (injected by dependency)

    Returns:
        GenerateEmailResponse: Email text, source tag and metadata

    Raises:
        400: If both subject and purpose are empty
    """
    with logfire.span("api.generate_email", language=request.language, tone=request.tone):
        try:
            result = await pipeline.run(request)
        except ValidationError as e:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ErrorResponse(error=str(e)).model_dump(),
            )

        return GenerateEmailResponse(
            email=result.text,
            source=result.source.value,
            metadata=EmailMetadataResponse.model_validate(result.metadata),
        )
