from fastapi import FastAPI, Depends, HTTPException, status
import logging
from contextlib import asynccontextmanager

# Use relative imports
from . import schemas, logic, config
from .errors import InvalidPrice, InvalidTemplate, TemplateNotFound
from .message_source import FileMessageSource, MessageSource
from .models import Item

# Basic logging setup
logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Order Service starting up...")
    logger.info(f"Listening on {config.APP_HOST}:{config.APP_PORT}")
    logger.info(f"Serving message templates from {config.MESSAGES_DIR}")
    yield
    logger.info("Order Service shutting down...")

app = FastAPI(
    title="Order Service",
    description="Computes order totals and taxes and renders a localized summary.",
    version="0.1.0",
    lifespan=lifespan
)


def get_message_source() -> MessageSource:
    """FastAPI dependency providing the template store."""
    return FileMessageSource(config.MESSAGES_DIR)


@app.get("/health", tags=["Monitoring"], summary="Health Check")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}

@app.get(
    "/languages",
    response_model=schemas.LanguagesResponse,
    tags=["Messages"],
    summary="List Available Languages"
)
async def list_languages(source: MessageSource = Depends(get_message_source)):
    """Lists the language codes that have a summary template."""
    return schemas.LanguagesResponse(languages=source.available_languages())

@app.post(
    "/orders/summary",
    response_model=schemas.OrderSummaryResponse,
    tags=["Orders"],
    summary="Summarize Order"
)
async def summarize_order_endpoint(
    request_data: schemas.OrderSummaryRequest,
    source: MessageSource = Depends(get_message_source)
):
    """
    Builds an in-memory order from the given items and returns its total,
    taxes and the summary message in the requested language.
    """
    language = request_data.language or config.DEFAULT_LANGUAGE
    logger.info(f"Received summary request: {len(request_data.items)} items, language '{language}'")
    try:
        order = logic.Order(source)
        for line in request_data.items:
            order.add_item(Item(category=line.category, name=line.name, price=line.price))
        message = await order.print_message(language)
    except InvalidPrice as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except TemplateNotFound as e:
        logger.warning(f"Summary requested for unknown language '{language}'")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidTemplate as e:
        logger.error(f"Broken template for language '{language}': {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Message template for '{language}' is malformed."
        )

    return schemas.OrderSummaryResponse(
        total=order.get_total(),
        taxes=order.get_taxes(),
        language=language,
        message=message
    )
