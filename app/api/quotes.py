from fastapi import APIRouter, Depends

from app.api.deps import get_quote_service
from app.models.mood import Quote
from app.services.quote_service import QuoteService

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.get("/random", response_model=Quote)
async def random_quote(service: QuoteService = Depends(get_quote_service)):
    return service.random_quote()
