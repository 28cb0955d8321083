# --- include all imports here ---
from fastapi import APIRouter, HTTPException, Request

from vibeforge.agent import DocumentSynthesizer
from vibeforge.errors import ClientInputError, UpstreamShapeError
from vibeforge.logger import get_logger
from vibeforge.models import CreateRequest, CreateResponse

logger = get_logger(__name__)


router = APIRouter()

GENERIC_FAILURE = "Failed to generate updated HTML."


def get_synthesizer(request: Request) -> DocumentSynthesizer:
    return request.app.state.synthesizer


@router.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "VibeForge API is running"}


@router.post("/api/create", response_model=CreateResponse)
async def create_page(body: CreateRequest, request: Request):
    """Generate a new page from the current one and a free-text request"""
    synthesizer = get_synthesizer(request)

    try:
        document = await synthesizer.synthesize(body.prompt, body.currentPage)
        logger.info(f"Created {document.filename} from {document.source_page}")
        return CreateResponse(filename=document.filename)

    except ClientInputError as e:
        logger.warning(f"Rejected create request: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except UpstreamShapeError as e:
        logger.warning(f"Unusable model output: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Failed to process create request: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERIC_FAILURE)
